"""Remote debug demo: a small sequential console program to step through with a debugger."""
