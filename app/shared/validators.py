"""Shared validation utilities"""

import re
from typing import Optional


def only_digits(value: str) -> str:
    return re.sub(r"\D", "", value or "")


def validate_cpf(cpf: Optional[str]) -> Optional[str]:
    """
    Normalize a CPF to its 11 digits.

    Accepts formatted ("123.456.789-09") or raw input. Only the length is
    enforced; check digits are not verified.

    Raises:
        ValueError: If the CPF does not have 11 digits
    """
    if cpf is None:
        return cpf

    digits = only_digits(cpf)
    if len(digits) != 11:
        raise ValueError("CPF deve ter 11 dígitos")
    return digits


def validate_br_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate and normalize a Brazilian phone number to its national digits.

    Accepts 10 (landline) or 11 (mobile) digits with area code, optionally
    prefixed with the +55 country code.

    Raises:
        ValueError: If phone number is invalid
    """
    if not phone:
        return phone

    digits = only_digits(phone)

    if digits.startswith("55") and len(digits) in (12, 13):
        digits = digits[2:]

    if len(digits) not in (10, 11):
        raise ValueError("Telefone deve ter DDD e 8 ou 9 dígitos")

    return digits


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def validate_hex_color(color: Optional[str]) -> Optional[str]:
    """Validate a #RRGGBB color and return it lowercased"""
    if color is None:
        return color
    if not re.match(r"^#[0-9a-fA-F]{6}$", color):
        raise ValueError("Cor deve estar no formato #RRGGBB")
    return color.lower()
