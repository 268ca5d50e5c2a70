"""Analytics domain: forecasting and derived financial metrics."""
