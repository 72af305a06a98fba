"""Infrastructure layer — process-lifetime graph storage.

It must never import from services, commands, or output.
The service layer bridges between the store and result envelopes.
"""
