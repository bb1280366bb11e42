"""
Demo: aggregate a batch of track records and print the field summaries.
"""

from enum import Enum

from multivar.aggregate import aggregate_records, summarize, summaries_to_yaml
from multivar.log import configure_logging


class Key(Enum):
    C = "C major"
    G = "G major"
    D = "D major"
    A = "A minor"


RECORDS = [
    {"title": "Intro", "tempo": 120, "gain": -3.5, "key": Key.C, "artist": "Band"},
    {"title": "Verse", "tempo": 121, "gain": -3.5, "key": Key.C, "artist": "Band"},
    {"title": "Chorus", "tempo": 122, "gain": -1.0, "key": Key.G, "artist": "Band"},
    {"title": "Bridge", "tempo": 90, "gain": -6.0, "key": Key.A, "artist": "Band"},
    {"title": "Outro", "tempo": 120, "key": Key.C, "artist": "Band"},
]

FIELDS = {"title": str, "tempo": int, "gain": float, "key": Key, "artist": str}


def print_summary(summary):
    print()
    print("=" * 70)
    print(f"FIELD: {summary.name}")
    print("=" * 70)
    print(f"  Value:        {summary.value_string or '-'}")
    print(f"  Placeholder:  {summary.placeholder_string or '-'}")
    print()
    print(summary.stats_string)


def main():
    configure_logging()
    multivars = aggregate_records(RECORDS, FIELDS, references={"artist": "Band", "tempo": 120})
    summaries = summarize(multivars)
    for summary in summaries:
        print_summary(summary)

    print()
    print("YAML export:")
    print(summaries_to_yaml(summaries))


if __name__ == "__main__":
    main()
