from .phone import format_phone_number_e164

__all__ = ["format_phone_number_e164"]
