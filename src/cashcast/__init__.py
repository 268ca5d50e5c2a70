"""cashcast: predictive financial analytics engine."""

__version__ = "0.1.0"
