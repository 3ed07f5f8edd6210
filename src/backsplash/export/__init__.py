"""Summaries of a generated pattern for handing over to an installer."""
