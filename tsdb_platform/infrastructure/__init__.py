"""Infrastructure: storage backends and security helpers implementing application ports."""
