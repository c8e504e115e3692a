import json

from slack_collector.models import OutputDocument
from utils import setup_logger

logger = setup_logger("OutputWriter")


def write_output(document: OutputDocument, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info(f"Wrote {len(document.channels)} channels to {path}")


def read_output(path: str) -> OutputDocument:
    with open(path, encoding="utf-8") as f:
        return OutputDocument.from_dict(json.load(f))


def count_messages(document: OutputDocument) -> int:
    return sum(len(ch.messages) for ch in document.channels)


def count_replies(document: OutputDocument) -> int:
    return sum(ch.reply_total for ch in document.channels)


def print_summary(output_file: str, total_messages: int, total_replies: int) -> None:
    print("\n" + "=" * 40)
    print("✅ Slack data collection complete")
    print(f"  Total messages: {total_messages}")
    print(f"  Total replies: {total_replies}")
    print(f"  Output file: {output_file}")
    print("=" * 40)


def append_github_output(path: str, output_file: str, total_messages: int, total_replies: int) -> None:
    """Append step outputs for GitHub Actions as key=value lines."""
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"slack-data-file={output_file}\n")
        f.write(f"total-messages={total_messages}\n")
        f.write(f"total-replies={total_replies}\n")
    logger.debug(f"Appended step outputs to {path}")
