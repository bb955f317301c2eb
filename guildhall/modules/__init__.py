"""Service modules orchestrating the Guildhall domain."""
