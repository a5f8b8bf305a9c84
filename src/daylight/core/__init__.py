"""Value types, errors and Julian Day Number conversions."""
