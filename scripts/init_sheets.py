from __future__ import annotations

from dotenv import load_dotenv

from config import load_settings

from church_attendance.common.logging_utils import configure_logging
from church_attendance.container import build_container
from church_attendance.integrations.bootstrap import ensure_sheet_headers


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(google_config=dict(settings.GOOGLE_CONFIG))
    touched = ensure_sheet_headers(container.sheets)
    titles = container.sheets.sheet_titles()
    print(
        f"OK: spreadsheet {settings.GOOGLE_CONFIG.get('spreadsheet_id')} "
        f"(sheets={len(titles)}, headers written={', '.join(touched) or 'none'})"
    )


if __name__ == "__main__":
    main()
