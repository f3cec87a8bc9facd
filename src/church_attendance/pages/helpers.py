from __future__ import annotations

from ..photos.service import photo_src

CLASS_ICONS = [("토끼", "🐰"), ("기린", "🦒"), ("사자", "🦁")]


def class_icon(class_name: str, default: str = "🏫") -> str:
    for keyword, icon in CLASS_ICONS:
        if keyword in (class_name or ""):
            return icon
    return default


def register_template_helpers(app) -> None:
    app.jinja_env.globals["class_icon"] = class_icon
    app.jinja_env.filters["photo_src"] = photo_src
