"""Discovery of `storefront.segments.segment_*` modules and their blueprints."""

from __future__ import annotations

import importlib
import pkgutil
from collections.abc import Iterator

from flask import Blueprint, Flask

SEGMENT_PREFIX = "segment_"


def segment_names() -> list[str]:
    """Short names ("meta", ...) of every segment module on disk, sorted."""
    import storefront.segments as segments_pkg

    return sorted(
        m.name[len(SEGMENT_PREFIX):]
        for m in pkgutil.iter_modules(segments_pkg.__path__)
        if not m.ispkg and m.name.startswith(SEGMENT_PREFIX)
    )


def _blueprints_of(module) -> Iterator[Blueprint]:
    return (obj for obj in vars(module).values() if isinstance(obj, Blueprint))


def register_all_segment_blueprints(app: Flask) -> list[str]:
    disabled = {s.strip() for s in app.config.get("DISABLED_SEGMENTS") or [] if s.strip()}
    registered: list[str] = []
    import_errors: list[dict] = []

    for name in segment_names():
        if name in disabled:
            app.logger.info("Segment %s disabled by config", name)
            continue
        mod_name = f"storefront.segments.{SEGMENT_PREFIX}{name}"
        try:
            module = importlib.import_module(mod_name)
        except ImportError as e:
            app.logger.warning("Skipping segment %s due to import error: %s", mod_name, e)
            import_errors.append({"module": mod_name, "error": str(e)})
            continue
        for bp in _blueprints_of(module):
            if bp.name not in app.blueprints:
                app.register_blueprint(bp)
                registered.append(bp.name)

    app.logger.info("Registered segment blueprints: %s", registered)
    app.config["SEGMENT_IMPORT_ERRORS"] = import_errors
    return registered
