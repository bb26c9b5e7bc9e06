"""
Example 01: Basic Mapping

This example demonstrates mapping dicts and objects onto dataclasses and
Pydantic models, with camelCase/underscore reconciliation and type coercion.
"""

from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel

from field_mapper import mapping, mapping_array


@dataclass
class UserDTO:
    """Transport object using camelCase names"""
    userName: str = ""
    age: int = 0
    signupDate: date | None = None


class UserModel(BaseModel):
    """Domain model using underscore names"""
    user_name: str = ""
    age: int = 0
    signup_date: date | None = None
    active: bool = True


def main():
    print("=== Basic Mapping ===\n")

    # Dict with underscore keys and textual values
    print("1. Dict -> dataclass:")
    row = {"user_name": "Alice", "age": "31", "signup_date": "2024-05-01", "extra": 1}
    dto = mapping(row, UserDTO)
    print(f"   {dto}\n")

    # camelCase dataclass back to an underscore Pydantic model
    print("2. Dataclass -> Pydantic model:")
    model = mapping(dto, UserModel)
    print(f"   {model!r}\n")

    # None never overwrites a destination default
    print("3. None values keep defaults:")
    model = mapping({"user_name": "Bob", "active": None}, UserModel)
    print(f"   active = {model.active}\n")

    # Bulk mapping preserves input order
    print("4. Bulk mapping:")
    rows = [{"user_name": "Carol", "age": 40}, {"user_name": "Dave", "age": 22}]
    for user in mapping_array(rows, UserDTO):
        print(f"   - {user.userName} ({user.age})")
    print()


if __name__ == "__main__":
    main()
