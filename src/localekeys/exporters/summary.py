"""Console summary of a generation run."""

from localekeys.core.types import RunSummary


def print_summary(summary: RunSummary):
    """Print summary statistics of a generation run."""
    print("\n" + "=" * 60)
    print("GENERATION SUMMARY")
    print("=" * 60)
    print(f"Reference document: {summary['reference']}")
    print(f"Documents: {len(summary['documents'])} ({', '.join(summary['documents'])})")
    if summary['skipped']:
        print(f"Skipped: {len(summary['skipped'])}")
        for path in summary['skipped']:
            print(f"  - {path}")
    print(f"Constants: {summary['entries']}")
    print(f"Table keys: {summary['table_keys']}")
    if summary['keys_path']:
        print(f"Keys file: {summary['keys_path']}")
    if summary['messages_path']:
        print(f"Messages file: {summary['messages_path']}")
    print("=" * 60)
    print()
