"""LiveViews of the web adapter."""
