"""Cancellation parts package (see ``modelbridge.base.cancellation``)."""
