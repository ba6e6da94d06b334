"""One module per lesson; each exposes ``run_all()`` and prints to stdout."""
