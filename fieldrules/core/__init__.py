# Core module exports
from fieldrules.core.config import Settings, get_settings
from fieldrules.core.logging import (
    configure_logging,
    get_logger,
    pool_logger,
    rule_logger,
    validator_logger,
)
