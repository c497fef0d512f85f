# =======================================================================================
# sphincter/utils/validators.py - Token Validation
# =======================================================================================
from typing import Mapping
from ..models.enums import Verdict
from ..models.schemas import TokenVerdict

# Readers emit runs of these on a bad or partial read
NOISE_CHARACTERS = "0F"


def is_noise_token(token: str) -> bool:
    """A token made up only of '0' and 'F' characters is a noise read, not a credential."""
    return all(c in NOISE_CHARACTERS for c in token)


class TokenValidator:
    """Checks tokens against a read-only authorized-token table."""

    def __init__(self, table: Mapping[str, str]):
        self.table = table

    def validate(self, token: str) -> TokenVerdict:
        """
        Classify a token.
        Exact match only: case and whitespace are significant as received.
        """
        if is_noise_token(token):
            return TokenVerdict(verdict=Verdict.MALFORMED)

        owner = self.table.get(token)
        if owner is None:
            return TokenVerdict(verdict=Verdict.UNAUTHORIZED)
        return TokenVerdict(verdict=Verdict.AUTHORIZED, owner=owner)
