"""
Example 03: Object Diff

This example demonstrates comparing two versions of an object and
snapshotting objects into dicts.
"""

from dataclasses import dataclass

from field_mapper import diff, to_dict


@dataclass
class Customer:
    name: str | None = None
    email: str | None = None
    tier: int | None = None


def main():
    print("=== Object Diff ===\n")

    before = Customer(name="Alice", email="alice@example.com", tier=1)
    after = Customer(name="Alice", email="alice@corp.example", tier=2)

    print("1. Changed fields:")
    for change in diff(before, after):
        print(f"   - {change.field_name}: '{change.old_value}' -> '{change.new_value}'")
    print()

    # None on the new object means "not provided", not "cleared"
    print("2. Partial update:")
    patch = Customer(tier=3)
    print(f"   {[change.field_name for change in diff(after, patch)]}\n")

    print("3. Snapshot:")
    print(f"   {to_dict(after)}\n")


if __name__ == "__main__":
    main()
