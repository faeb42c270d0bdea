"""Text and input handling shared by the wallet's smaller dialogs."""

from __future__ import annotations

from dataclasses import dataclass

WALLET_SUFFIX = ".wallet"
UINT32_MAX = 0xFFFFFFFF

_LANGUAGE_NAMES = {
    "en": "English",
    "nl": "Nederlands",
    "fr": "Français",
    "es": "Español",
    "pt": "Português",
    "jp": "日本語",
    "it": "Italiano",
    "de": "Deutsch",
    "ru": "русский язык",
    "cn": "简体中文 (中国)",
    "uk": "українська мова",
    "pl": "język polski",
    "be": "русский язык",
}
_DEFAULT_LANGUAGE = "English"


def language_name(code: str) -> str:
    """Mnemonic seed word list name for an interface language code.

    Unknown codes fall back to English.
    """
    return _LANGUAGE_NAMES.get(code, _DEFAULT_LANGUAGE)


def ensure_wallet_suffix(path: str) -> str:
    """Append the wallet file extension to a chosen path unless it is empty or present."""
    if path and not path.endswith(WALLET_SUFFIX):
        return path + WALLET_SUFFIX
    return path


def confirm_send_title(amount_text: str, ticker: str = "KRB") -> str:
    """Window title of the send confirmation dialog."""
    return f"Confirm sending {amount_text} {ticker}"


def payment_id_text(payment_id: str) -> str:
    """Confirmation line that shows the payment ID of a transfer."""
    return f"<html><head/><body><p>Payment ID: {payment_id}</p></body></html>"


def no_payment_id_text() -> str:
    """Confirmation line asking whether to send without a payment ID."""
    return (
        "<html><head/><body><p>Are you sure you want to send "
        "<strong>without Payment ID</strong>?</p></body></html>"
    )


def proof_amount(amount: int, balance: int) -> int:
    """Amount a balance proof is generated for.

    A requested amount that is zero or above a non-zero balance is replaced by
    the whole balance. A result of 0 means no proof can be generated.
    """
    if amount < 0 or balance < 0:
        raise ValueError("amount and balance must not be negative")
    if balance != 0 and (amount > balance or amount == 0):
        amount = balance
    return amount if amount > 0 else 0


@dataclass(frozen=True)
class KeyImport:
    """What the user entered to restore a wallet from a key."""

    key: str
    path: str
    sync_height: int = 0

    @classmethod
    def from_input(cls, key: str, path: str, sync_height: int = 0) -> KeyImport:
        """Trim the entered key and path and check the synchronization height."""
        if not 0 <= sync_height <= UINT32_MAX:
            raise ValueError(f"sync height {sync_height} is out of range")
        return cls(key.strip(), path.strip(), sync_height)