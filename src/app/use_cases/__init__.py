"""
Use Cases

Organized into domain folders:
- registration/: Tenant team directory registration
- checkout/: Change order payments
- notifications/: SMS notifications to team members and clients
- portal/: Client portal alerts
- parsing/: AI-assisted PDF extraction
- site/: Tenant company configuration

Import from subdirectories.
"""
