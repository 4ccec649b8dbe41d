"""Domain model parts (see ``modelbridge.base.models``)."""
