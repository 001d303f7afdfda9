"""Compare a source sitemap against a new sitemap and report missing URLs."""
