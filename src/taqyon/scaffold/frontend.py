"""Frontend template materialization.

Copies the ``<framework>-<language>`` template into ``frontend/`` and
makes sure the QWebChannel glue files exist: the bridge module under
``frontend/src`` and the loader script under ``frontend/public``.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from taqyon.exceptions import ScaffoldError
from taqyon.scaffold.answers import ScaffoldAnswers
from taqyon.scaffold.templates import (
    copy_file_with_dirs,
    copy_tree,
    copy_tree_with_replace,
)

logger = logging.getLogger(__name__)

# Vue templates contain Vue's own ``{{ }}`` interpolation and are copied verbatim.
_SUBSTITUTED_FRAMEWORKS = frozenset({"react", "svelte"})

_VITE_DEFINE = re.compile(r"defineConfig\(\s*\{([\s\S]*?)plugins:")


def patch_vite_base(config_text: str) -> str:
    """Add ``base: './'`` to a Vite config so the build loads from ``file://``.

    Returns the text unchanged when a ``base:`` key is already present.
    """
    if "base:" in config_text:
        return config_text
    return _VITE_DEFINE.sub(
        lambda m: "defineConfig({\n  base: './',\n  " + m.group(1).lstrip() + "plugins:",
        config_text,
        count=1,
    )


def scaffold_frontend(
    answers: ScaffoldAnswers, project_root: Path, templates: Path,
) -> list[Path]:
    """Materialize ``frontend/`` for the chosen framework and language.

    Returns:
        Paths of files written.

    Raises:
        TemplateError: If the template is missing or cannot be copied.
        ScaffoldError: If ``frontend/package.json`` was not produced.
    """
    frontend_dir = project_root / "frontend"
    template_dir = templates / "frontend" / answers.frontend_template

    if answers.frontend_framework in _SUBSTITUTED_FRAMEWORKS:
        written = copy_tree_with_replace(
            template_dir, frontend_dir, {"projectName": answers.project_name},
        )
    else:
        written = copy_tree(template_dir, frontend_dir)
    logger.info("Copied %s template to %s", answers.frontend_template, frontend_dir)

    if answers.frontend_language == "ts":
        bridge_src = template_dir / "src" / "qwebchannel-bridge.ts"
        bridge_dest = frontend_dir / "src" / "qwebchannel-bridge.ts"
        if not bridge_src.exists():
            bridge_src = templates / "qwebchannel-bridge.js"
            bridge_dest = frontend_dir / "src" / "qwebchannel-bridge.js"
    else:
        bridge_src = templates / "qwebchannel-bridge.js"
        bridge_dest = frontend_dir / "src" / "qwebchannel-bridge.js"
    if not bridge_dest.exists():
        copy_file_with_dirs(bridge_src, bridge_dest)
        written.append(bridge_dest)
        logger.info("Injected %s into frontend/src", bridge_dest.name)

    loader_dest = frontend_dir / "public" / "qwebchannel-loader.js"
    if not loader_dest.exists():
        copy_file_with_dirs(templates / "qwebchannel-loader.js", loader_dest)
        written.append(loader_dest)
        logger.info("Injected qwebchannel-loader.js into frontend/public")

    if answers.frontend_framework == "svelte":
        vite_config = frontend_dir / "vite.config.js"
        if vite_config.exists():
            original = vite_config.read_text(encoding="utf-8")
            patched = patch_vite_base(original)
            if patched != original:
                vite_config.write_text(patched, encoding="utf-8")
                logger.info("Patched vite.config.js to set base: './'")

    if not (frontend_dir / "package.json").exists():
        raise ScaffoldError(
            "frontend/package.json was not created. "
            "Frontend scaffolding failed or is incomplete."
        )
    return written
