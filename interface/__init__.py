"""Terminal and REST front ends for the engine."""
