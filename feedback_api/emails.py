"""Email address normalization.

Syntax checks and the canonical form come from email-validator. On top of that
the whole address is lowercased and the big mail providers' aliasing rules are
folded away, so ``John.Doe+news@GoogleMail.com`` is stored as
``johndoe@gmail.com``.
"""

from typing import Optional

from email_validator import EmailNotValidError, validate_email

GMAIL_DOMAINS = {"gmail.com", "googlemail.com"}

ICLOUD_DOMAINS = {"icloud.com", "me.com"}

OUTLOOK_DOMAINS = {
    "hotmail.at", "hotmail.be", "hotmail.ca", "hotmail.cl", "hotmail.co.il",
    "hotmail.co.nz", "hotmail.co.th", "hotmail.co.uk", "hotmail.com",
    "hotmail.com.ar", "hotmail.com.au", "hotmail.com.br", "hotmail.com.gr",
    "hotmail.com.mx", "hotmail.com.pe", "hotmail.com.tr", "hotmail.com.vn",
    "hotmail.cz", "hotmail.de", "hotmail.dk", "hotmail.es", "hotmail.fr",
    "hotmail.hu", "hotmail.id", "hotmail.ie", "hotmail.in", "hotmail.it",
    "hotmail.jp", "hotmail.kr", "hotmail.lv", "hotmail.my", "hotmail.ph",
    "hotmail.pt", "hotmail.sa", "hotmail.sg", "hotmail.sk",
    "live.be", "live.co.uk", "live.com", "live.com.ar", "live.com.mx",
    "live.de", "live.es", "live.eu", "live.fr", "live.it", "live.nl",
    "msn.com",
    "outlook.at", "outlook.be", "outlook.cl", "outlook.co.il", "outlook.co.nz",
    "outlook.co.th", "outlook.com", "outlook.com.ar", "outlook.com.au",
    "outlook.com.br", "outlook.com.gr", "outlook.com.pe", "outlook.com.tr",
    "outlook.com.vn", "outlook.cz", "outlook.de", "outlook.dk", "outlook.es",
    "outlook.fr", "outlook.hu", "outlook.id", "outlook.ie", "outlook.in",
    "outlook.it", "outlook.jp", "outlook.kr", "outlook.lv", "outlook.my",
    "outlook.ph", "outlook.pt", "outlook.sa", "outlook.sg", "outlook.sk",
    "passport.com",
}

YAHOO_DOMAINS = {
    "rocketmail.com", "yahoo.ca", "yahoo.co.uk", "yahoo.com", "yahoo.de",
    "yahoo.fr", "yahoo.in", "yahoo.it", "ymail.com",
}

YANDEX_DOMAINS = {"yandex.ru", "yandex.ua", "yandex.kz", "yandex.com", "yandex.by", "ya.ru"}


def _fold_local_part(local: str, domain: str) -> tuple:
    if domain in GMAIL_DOMAINS:
        return local.split("+")[0].replace(".", ""), "gmail.com"
    if domain in ICLOUD_DOMAINS or domain in OUTLOOK_DOMAINS:
        return local.split("+")[0], domain
    if domain in YAHOO_DOMAINS:
        parts = local.split("-")
        return ("-".join(parts[:-1]) if len(parts) > 1 else parts[0]), domain
    if domain in YANDEX_DOMAINS:
        return local, "yandex.ru"
    return local, domain


def normalize_email(value: str) -> Optional[str]:
    """Normalized address, or None when ``value`` is not a usable address.

    An address whose local part is empty once the provider rules are applied
    (``+news@gmail.com``) counts as unusable.
    """
    try:
        normalized = validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError:
        return None

    local, _, domain = normalized.lower().rpartition("@")
    local, domain = _fold_local_part(local, domain)
    if not local:
        return None
    return f"{local}@{domain}"
