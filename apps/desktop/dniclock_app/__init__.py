"""Desktop D'ni clock: command line tools and the clock window."""
