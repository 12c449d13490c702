"""pearstate API: link classification, storage derivation, routing, package lookup and state."""
