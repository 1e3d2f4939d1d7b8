"""Country flag lookup: ISO 3166-1 alpha-2 codes and custom region flags."""

from __future__ import annotations

from typing import Literal

FlagSize = Literal["h20", "h24", "h40", "h60", "h80", "h120"]

FLAG_SIZES: tuple[str, ...] = ("h20", "h24", "h40", "h60", "h80", "h120")
FLAG_CDN_URL = "https://flagcdn.com"
FALLBACK_FLAG_URL = f"{FLAG_CDN_URL}/w80/un.png"
FALLBACK_FLAG_EMOJI = "\U0001F3F3\uFE0F"

COUNTRY_CODES: dict[str, str] = {
    # A
    "afghanistan": "af", "albania": "al", "algeria": "dz", "andorra": "ad",
    "angola": "ao", "argentina": "ar", "armenia": "am", "australia": "au", "aruba": "aw",
    "austria": "at", "azerbaijan": "az",
    # B
    "bahamas": "bs", "bahrain": "bh", "bangladesh": "bd", "barbados": "bb",
    "belarus": "by", "belgium": "be", "belize": "bz", "benin": "bj",
    "bhutan": "bt", "bolivia": "bo", "bosnia": "ba", "botswana": "bw",
    "brazil": "br", "brunei": "bn", "bulgaria": "bg", "burkina faso": "bf",
    "burundi": "bi",
    # C
    "cambodia": "kh", "cameroon": "cm", "canada": "ca", "cape verde": "cv",
    "chad": "td", "chile": "cl", "china": "cn", "colombia": "co",
    "comoros": "km", "congo": "cg", "costa rica": "cr", "croatia": "hr",
    "cuba": "cu", "cyprus": "cy", "czech republic": "cz", "czechia": "cz",
    # D
    "denmark": "dk", "djibouti": "dj", "dominica": "dm", "dominican republic": "do",
    # E
    "ecuador": "ec", "egypt": "eg", "el salvador": "sv", "estonia": "ee", "eswatini": "sz",
    "ethiopia": "et",
    # F
    "fiji": "fj", "finland": "fi", "france": "fr",
    # G
    "gabon": "ga", "gambia": "gm", "georgia": "ge", "germany": "de",
    "ghana": "gh", "greece": "gr", "grenada": "gd", "guatemala": "gt",
    "guinea": "gn", "guyana": "gy",
    # H
    "haiti": "ht", "honduras": "hn", "hungary": "hu", "hong kong": "hk",
    # I
    "iceland": "is", "isle of man": "im", "india": "in", "indonesia": "id", "iran": "ir",
    "iraq": "iq", "ireland": "ie", "israel": "il", "italy": "it",
    # J
    "jamaica": "jm", "japan": "jp", "jordan": "jo",
    # K
    "kazakhstan": "kz", "kenya": "ke", "kuwait": "kw", "kyrgyzstan": "kg",
    # L
    "laos": "la", "latvia": "lv", "lebanon": "lb", "lesotho": "ls",
    "liberia": "lr", "libya": "ly", "lithuania": "lt", "luxembourg": "lu",
    # M
    "madagascar": "mg", "malawi": "mw", "malaysia": "my", "maldives": "mv",
    "mali": "ml", "malta": "mt", "mauritania": "mr", "mauritius": "mu",
    "mexico": "mx", "moldova": "md", "monaco": "mc", "mongolia": "mn",
    "montenegro": "me", "morocco": "ma", "mozambique": "mz", "myanmar": "mm", "macau": "mo",
    # N
    "namibia": "na", "nepal": "np", "netherlands": "nl", "new zealand": "nz",
    "nicaragua": "ni", "niger": "ne", "nigeria": "ng", "north korea": "kp",
    "north macedonia": "mk", "norway": "no",
    # O
    "oman": "om",
    # P
    "pakistan": "pk", "panama": "pa", "paraguay": "py", "peru": "pe",
    "philippines": "ph", "poland": "pl", "portugal": "pt",
    # Q
    "qatar": "qa",
    # R
    "romania": "ro", "russia": "ru", "rwanda": "rw",
    # S
    "saudi arabia": "sa", "senegal": "sn", "serbia": "rs", "singapore": "sg",
    "slovakia": "sk", "slovenia": "si", "somalia": "so", "south africa": "za",
    "south korea": "kr", "south sudan": "ss", "spain": "es", "sri lanka": "lk",
    "sudan": "sd", "sweden": "se", "switzerland": "ch", "syria": "sy", "solomon islands": "sb",
    # T
    "taiwan": "tw", "tajikistan": "tj", "tanzania": "tz", "thailand": "th",
    "togo": "tg", "tonga": "to", "trinidad and tobago": "tt", "tunisia": "tn", "turkey": "tr",
    "turkmenistan": "tm",
    # U
    "uganda": "ug", "ukraine": "ua", "united arab emirates": "ae",
    "united kingdom": "gb", "united states": "us",
    "uruguay": "uy", "uzbekistan": "uz",
    # V
    "venezuela": "ve", "vietnam": "vn",
    # Y
    "yemen": "ye",
    # Z
    "zambia": "zm", "zimbabwe": "zw",
    "european union": "eu",
    "falkland islands": "fk",
    "papua new guinea": "pg",
}

# regions flagcdn does not carry; served from the static assets
CUSTOM_FLAGS: dict[str, str] = {
    "west africa": "/custom-flags/west-africa.jpg",
    "central africa": "/custom-flags/central-africa.jpg",
    "west-africa": "/custom-flags/west-africa.jpg",
    "central-africa": "/custom-flags/central-africa.jpg",
    "eritrea": "/custom-flags/langfr-960px-Flag_of_Eritrea.svg.png",
    "netherlands antilles": "/custom-flags/netherlands-antille.jpg",
    "netherlands-antilles": "/custom-flags/netherlands-antille.jpg",
    "french pacific territories": "/custom-flags/Flag_of_French_Polynesia.svg.png",
    "french-pacific-territories": "/custom-flags/Flag_of_French_Polynesia.svg.png",
}

# offset from "A" to REGIONAL INDICATOR SYMBOL LETTER A
_REGIONAL_INDICATOR_OFFSET = 127397


def _normalize(name: str) -> str:
    return name.lower().strip()


def get_country_code(country_name: str) -> str | None:
    return COUNTRY_CODES.get(_normalize(country_name))


def get_country_flag_url(country_name: str, size: FlagSize = "h80") -> str:
    """
    Flag image URL for a country name.

    Custom region flags win, then flagcdn.com by ISO code; unknown names get
    the UN flag.
    """
    if size not in FLAG_SIZES:
        raise ValueError(f"Unsupported flag size: {size}")

    normalized = _normalize(country_name)
    custom = CUSTOM_FLAGS.get(normalized)
    if custom:
        return custom

    code = COUNTRY_CODES.get(normalized)
    if not code:
        return FALLBACK_FLAG_URL
    return f"{FLAG_CDN_URL}/{size}/{code}.png"


def get_country_flag_emoji(country_name: str) -> str:
    code = get_country_code(country_name)
    if not code:
        return FALLBACK_FLAG_EMOJI
    return "".join(chr(_REGIONAL_INDICATOR_OFFSET + ord(char)) for char in code.upper())


__all__ = [
    "COUNTRY_CODES",
    "CUSTOM_FLAGS",
    "FLAG_SIZES",
    "FlagSize",
    "get_country_code",
    "get_country_flag_emoji",
    "get_country_flag_url",
]
