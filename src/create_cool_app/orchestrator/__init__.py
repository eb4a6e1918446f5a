"""Scaffolding pipeline orchestration."""

from .pipeline import DeferredFailure, ScaffoldPipeline, ScaffoldReport, Stage

__all__ = ["DeferredFailure", "ScaffoldPipeline", "ScaffoldReport", "Stage"]
