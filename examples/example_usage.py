"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

from dotenv import load_dotenv

from config import load_settings

from church_attendance.container import build_container


def main():
    load_dotenv(override=False)
    settings = load_settings()
    container = build_container(google_config=settings.GOOGLE_CONFIG)
    summary = container.attendance_service.today_summary()
    print(f"{summary.attended_count}/{summary.total} attended")
    for group in summary.classes:
        print(f"  {group.class_name}: {len(group.attended)}/{group.total}")


if __name__ == "__main__":
    main()
