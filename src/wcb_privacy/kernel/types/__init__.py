"""Kernel types – User, Record, MetaBag."""
from wcb_privacy.kernel.types.record import MetaBag, Record, User

__all__ = ["MetaBag", "Record", "User"]
