"""Workers API domains: bindings, scripts and routes."""
