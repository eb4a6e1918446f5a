"""Template materialization for create-cool-app."""

from .manager import (
    bundled_templates_root,
    list_templates,
    resolve_template_dir,
)
from .materializer import (
    CopyEntry,
    MaterializeResult,
    build_copy_plan,
    materialize,
)
from .placeholders import (
    PLACEHOLDER_PATTERN,
    is_replaceable,
    substitute,
)
from .policy import CopyAction, CopyDecision, classify
from .resolver import ResolverCache, ValueResolver, parse_git_config

__all__ = [
    "CopyAction",
    "CopyDecision",
    "CopyEntry",
    "MaterializeResult",
    "PLACEHOLDER_PATTERN",
    "ResolverCache",
    "ValueResolver",
    "build_copy_plan",
    "bundled_templates_root",
    "classify",
    "is_replaceable",
    "list_templates",
    "materialize",
    "parse_git_config",
    "resolve_template_dir",
    "substitute",
]
