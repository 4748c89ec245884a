"""Blue-green deployment demo service package."""
