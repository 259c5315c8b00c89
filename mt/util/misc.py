from datetime import datetime



# Simply returns the current local time as an ISO8601 string with timezone offset.
def now_iso():
    return datetime.now().astimezone().isoformat()


# Formats a duration in seconds as MM:SS. Whole seconds are truncated and the absolute value is used, so minutes
# can run past 99 and an overrun renders the same digits as the matching countdown. With signed=True a leading "-"
# marks negative whole seconds.
def format_countdown(seconds, signed=False):
    whole = int(seconds)
    minutes, secs = divmod(abs(whole), 60)
    text = f"{minutes:02d}:{secs:02d}"
    if signed and whole < 0:
        return f"-{text}"
    return text
