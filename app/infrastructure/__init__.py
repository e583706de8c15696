"""Infrastructure: repositories, cache stores, and services implementing application ports."""
