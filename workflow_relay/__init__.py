"""
Workflow Relay - GitHub file update and workflow run webhook relay.
"""
__version__ = "1.0.0"
