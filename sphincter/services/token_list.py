# =======================================================================================
# sphincter/services/token_list.py - Authorized Token List
# =======================================================================================
import logging
from types import MappingProxyType
from typing import Mapping
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def parse_token_list(text: str) -> Mapping[str, str]:
    """
    Parse "<token> <owner label...>" lines into a read-only token -> owner mapping.
    Blank lines and lines with a single field are ignored.
    """
    users = {}
    for line in text.splitlines():
        fields = line.split()
        if len(fields) > 1:
            users[fields[0]] = " ".join(fields[1:])
    return MappingProxyType(users)


def load_token_table(path: str) -> Mapping[str, str]:
    """Read the token list file; any failure is fatal at startup."""
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read token list {path}: {e}") from e

    users = parse_token_list(text)
    logger.info("Found %d users in %s", len(users), path)
    return users
