"""
Agentic Caller - turn a short call description into a spoken Twilio call.
"""
