# =======================================================================================
# sphincter/services/access_control.py - Core Business Logic
# =======================================================================================
import logging
from ..models.enums import ActuationCommand, ScanOutcome, Verdict
from ..utils.validators import TokenValidator
from .arbiter import ActuationArbiter
from .debounce import DebounceGate

logger = logging.getLogger(__name__)


class AccessControlService:
    """Turns a presented token into at most one Open command."""

    def __init__(self, validator: TokenValidator, gate: DebounceGate, arbiter: ActuationArbiter):
        self.validator = validator
        self.gate = gate
        self.arbiter = arbiter

    def handle_token(self, token: str) -> ScanOutcome:
        """
        Run a token through validation, then the debounce gate, then queue an Open.
        Malformed and unknown tokens never touch the gate.
        """
        result = self.validator.validate(token)

        if result.verdict == Verdict.MALFORMED:
            logger.debug("Ignoring noise read %r", token)
            return ScanOutcome.MALFORMED

        if result.verdict == Verdict.UNAUTHORIZED:
            logger.info("Could not find key %s", token)
            return ScanOutcome.DENIED

        if not self.gate.admit():
            logger.info("Triggered too fast; skipped unlock")
            return ScanOutcome.DEBOUNCED

        logger.info("Hello %s %s", token, result.owner)
        self.arbiter.submit(ActuationCommand.OPEN)
        return ScanOutcome.GRANTED
