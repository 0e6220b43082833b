"""Meetup networking assistant: attendee list in, enriched LinkedIn profiles out."""
