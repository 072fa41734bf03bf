"""
wcb_privacy – personal data export for WordCamp budget records.

Import path convention::

    from wcb_privacy.application.privacy import build_privacy_registry
    from wcb_privacy.adapters.memory import InMemoryRecordStore, InMemoryUserDirectory
    from wcb_privacy.config import PrivacySettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
