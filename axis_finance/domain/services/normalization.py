"""Normalization of closed-set labels coming from external records."""

from axis_finance.domain.constants import (
    ACCOUNT_TYPE_ALIASES,
    CATEGORY_TYPE_ALIASES,
    LOGIC_TAG_ALIASES,
    TRANSACTION_STATUS_ALIASES,
    AccountType,
    CategoryType,
    LogicTag,
    TransactionStatus,
)
from axis_finance.domain.errors import DomainValidationError


def normalize_label(value: str | None) -> str | None:
    """Normalize a raw label for lookups.

    Args:
        value: Raw label from a repository or user input.

    Returns:
        str | None: Stripped, upper-cased label, or None when blank.
    """
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned.upper() if cleaned else None


def _parse(value, enum_type, aliases: dict, field_name: str):
    if isinstance(value, enum_type):
        return value
    label = normalize_label(value)
    if label is None:
        raise DomainValidationError(f"Missing {field_name}")
    if label in aliases:
        return aliases[label]
    try:
        return enum_type(label)
    except ValueError as exc:
        raise DomainValidationError(
            f"Unknown {field_name}: {value!r}"
        ) from exc


def parse_account_type(value) -> AccountType:
    return _parse(value, AccountType, ACCOUNT_TYPE_ALIASES, "account type")


def parse_category_type(value) -> CategoryType:
    return _parse(value, CategoryType, CATEGORY_TYPE_ALIASES, "category type")


def parse_status(value) -> TransactionStatus:
    return _parse(
        value,
        TransactionStatus,
        TRANSACTION_STATUS_ALIASES,
        "transaction status",
    )


def parse_logic_tag(value) -> LogicTag | None:
    """Return the logic tag for a label, or None when it is not recognised.

    Unknown tags are not an error: the category simply stays out of the
    essential/superfluous/investment split.
    """
    if isinstance(value, LogicTag):
        return value
    label = normalize_label(value)
    if label is None:
        return None
    if label in LOGIC_TAG_ALIASES:
        return LOGIC_TAG_ALIASES[label]
    try:
        return LogicTag(label)
    except ValueError:
        return None


__all__ = [
    "normalize_label",
    "parse_account_type",
    "parse_category_type",
    "parse_status",
    "parse_logic_tag",
]
