"""cashdesk-payments: point-of-sale payment lifecycle core."""
