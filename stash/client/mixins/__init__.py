"""Client mixins, one per query family."""
