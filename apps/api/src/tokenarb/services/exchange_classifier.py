import re
from typing import Optional

# Lowercase substrings. Matching is plain containment, no word boundaries.
DEX_KEYWORDS = [
    "uniswap", "pancakeswap", "sushiswap", "curve", "balancer", "1inch",
    "kyberswap", "quickswap", "traderjoe", "trader joe", "raydium", "orca",
    "jupiter", "aerodrome", "velodrome", "camelot", "osmosis", "thorswap",
    "bancor", "dodo", "maverick", "meteora", "dex", "swap",
    # network names only show up in DEX venue names
    "ethereum", "arbitrum", "optimism", "polygon", "bsc", "avalanche", "solana",
]

CHAIN_NAMES = [
    "ethereum", "bsc", "bnb chain", "polygon", "arbitrum", "optimism", "base",
    "avalanche", "solana", "fantom", "zksync", "linea", "blast",
]

MIN_CLEAN_LENGTH = 3

_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")
_VERSION_RE = re.compile(r"\(\s*v\d+(?:\.\d+)?\s*\)", re.IGNORECASE)
_CHAIN_RE = re.compile(
    r"\(\s*(?:" + "|".join(re.escape(c) for c in CHAIN_NAMES) + r")\s*\)", re.IGNORECASE
)
_NOISE_WORDS_RE = re.compile(r"\b(?:pool|exchange|version)\b", re.IGNORECASE)
_TRAILING_SEP_RE = re.compile(r"[-.\s]+$")

def classify(exchange_name: Optional[str]) -> bool:
    """True when the venue name looks like a decentralized exchange."""
    if not exchange_name:
        return False
    name = exchange_name.lower()
    return any(k in name for k in DEX_KEYWORDS)

def venue_type(exchange_name: Optional[str]) -> str:
    return "DEX" if classify(exchange_name) else "CEX"

def clean_display_name(exchange_name: Optional[str]) -> str:
    """
    Strip contract addresses, version/network tags and filler words from a DEX
    venue name. Falls back to the original name when less than
    MIN_CLEAN_LENGTH characters would remain.
    """
    if not exchange_name:
        return ""
    s = _ADDRESS_RE.sub("", exchange_name)
    s = _VERSION_RE.sub("", s)
    s = _CHAIN_RE.sub("", s)
    s = _NOISE_WORDS_RE.sub("", s)
    s = " ".join(s.split())
    s = _TRAILING_SEP_RE.sub("", s).strip()
    if len(s) < MIN_CLEAN_LENGTH:
        return exchange_name
    return s

def display_name(exchange_name: Optional[str]) -> str:
    """Cleaned name for DEX venues, the name as-is for everything else."""
    if classify(exchange_name):
        return clean_display_name(exchange_name)
    return exchange_name or ""
