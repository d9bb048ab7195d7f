"""Pure time zone logic: parsing, aliasing, zone lookup, formatting."""
