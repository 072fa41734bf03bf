"""Kernel – error hierarchy and record types shared by every layer."""
