"""Framework integrations for cookieless client ids."""
