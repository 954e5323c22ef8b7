"""Domain ports — abstract interfaces implemented by infrastructure."""
