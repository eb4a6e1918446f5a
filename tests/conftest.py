from __future__ import annotations

from pathlib import Path

import pytest

from create_cool_app.core.settings import HOME_ENV_VAR, TEMPLATE_ROOT_ENV_VAR
from tests.utils import write_tree


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from the real ~/.create-cool-app."""
    home = tmp_path_factory.mktemp("cca-home")
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    monkeypatch.delenv(TEMPLATE_ROOT_ENV_VAR, raising=False)
    return home


@pytest.fixture()
def library_template(tmp_path: Path) -> Path:
    """A template-library tree including entries that must never be copied."""
    root = tmp_path / "templates" / "template-library"
    write_tree(
        root,
        {
            "package.json": (
                '{\n  "name": "${projectname}",\n  "author": "${yourname}",\n'
                '  "packageManager": "${pkgManager}@${pkgManagerVersion}"\n}\n'
            ),
            "README.md": "# ${projectname}\n\nRun `${pkgManagerX} vitest` as ${ yourName }. Keep ${unknownToken}.\n",
            "_gitignore": "node_modules\ndist\n",
            "rollup.config.js": "export default { input: 'src/index.js' } // ${projectname}\n",
            "src/index.js": "export const add = (a, b) => a + b\n",
            "node_modules/left-pad/index.js": "module.exports = 1\n",
            "dist/index.cjs": "built\n",
            "pnpm-lock.yaml": "lockfileVersion: 6\n",
        },
    )
    return root


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    target = tmp_path / "workspace"
    target.mkdir()
    return target
