"""
auth — User authentication module.

Provides:
  • JWT bearer token issuance & verification
  • Password hashing (bcrypt)
  • Signup / Signin API routes
  • ``require_identity`` FastAPI dependency
"""
