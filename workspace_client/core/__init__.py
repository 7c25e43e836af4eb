"""Pure workspace logic: state transitions and upload validation."""
