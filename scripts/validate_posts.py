import logging
import sys

from pressroom.repos.content_repo import FileContentRepo
from pressroom.services.content_validator import validate_records
from pressroom.settings import settings

logger = logging.getLogger(__name__)


def main() -> int:
    repo = FileContentRepo(
        settings.content_path,
        sections=settings.CONTENT_SECTIONS,
        pattern=settings.CONTENT_GLOB,
    )
    records = repo.list_records()
    issues = validate_records(records)

    for issue in issues:
        print(f"{issue.path}: {issue.message}")

    if issues:
        print("\nCommon fixes:")
        print("- Use spaces (not tabs) for YAML indentation")
        print("- Ensure all required fields are present")
        print("- Check date format (YYYY-MM-DD)")
        print("- Verify categories is a list")
        return 1

    print(f"All {len(records)} posts are valid")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper()))
    sys.exit(main())
