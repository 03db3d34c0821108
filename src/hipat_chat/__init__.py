"""hipat-chat — terminal chat client for the HiPat fitness and nutrition assistant."""

__version__ = '0.3.0'
