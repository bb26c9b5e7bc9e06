"""
Example 02: Explicit Mapping and Converters

This example demonstrates explicit field renames, custom converters and a
dedicated mapper with its own configuration and caches.
"""

from dataclasses import dataclass
from decimal import Decimal

from field_mapper import FieldMapping, MapperConfig, ObjectMapper, TypeCoercer


@dataclass
class Invoice:
    invoice_no: str = ""
    amount: float = 0.0
    paid: bool = False


@dataclass
class InvoiceRow:
    number: str = ""
    amount: str = ""
    paid: bool = False


def main():
    print("=== Explicit Mapping ===\n")

    mapper = ObjectMapper(config=MapperConfig(true_strings=frozenset({"true", "paid"})))

    # invoice_no has no convention-based counterpart, rename it explicitly
    print("1. Explicit rename:")
    renames = FieldMapping().field("invoice_no", "number")
    row = mapper.mapping(Invoice(invoice_no="INV-7", amount=1e-7), InvoiceRow, renames)
    print(f"   {row}")
    print(f"   plan: {mapper.plan_for(Invoice(), InvoiceRow, renames).as_dict()}\n")

    # Text parsing honours the configured true strings
    print("2. Configured boolean words:")
    invoice = mapper.mapping({"invoice_no": "INV-8", "paid": "paid"}, Invoice)
    print(f"   {invoice}\n")

    # A custom converter replaces the standard one for its target type
    print("3. Custom converter:")
    coercer = TypeCoercer()
    coercer.register(str, lambda value: f"{Decimal(str(value)):.2f}")
    money_mapper = ObjectMapper(coercer=coercer)
    row = money_mapper.mapping(Invoice(invoice_no="INV-9", amount=12.5), InvoiceRow, renames)
    print(f"   {row}\n")


if __name__ == "__main__":
    main()
