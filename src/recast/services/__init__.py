"""Services used by the Recast client."""
