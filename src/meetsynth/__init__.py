"""MeetSynth: AI summaries with multi-recipient email delivery."""
