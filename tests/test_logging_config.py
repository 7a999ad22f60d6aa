# =============================================================================
# tests/test_logging_config.py - Log Masking Tests
# =============================================================================

import logging

from clientes_api.app.core.logging_config import EmailMaskingFilter, mask_email


def make_record(msg, *args):
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


def test_mask_email():
    assert mask_email("carlos@email.com") == "c***@email.com"
    assert mask_email("semarroba") == "***"


def test_filter_masks_addresses_in_arguments():
    record = make_record("Rejected %s and %s", "carlos@email.com", "ana@email.com")

    assert EmailMaskingFilter().filter(record) is True
    assert record.getMessage() == "Rejected c***@email.com and a***@email.com"


def test_filter_leaves_other_messages_untouched():
    record = make_record("Created cliente %s", 1)

    EmailMaskingFilter().filter(record)

    assert record.msg == "Created cliente %s"
    assert record.args == (1,)
