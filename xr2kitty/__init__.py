"""xr2kitty — convert X resources terminal colours into a KiTTY registry session."""
