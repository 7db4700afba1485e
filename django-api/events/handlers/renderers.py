import json

from rest_framework.renderers import BaseRenderer


class ICalendarRenderer(BaseRenderer):
    """Pass pre-rendered iCalendar text straight through."""

    media_type = "text/calendar"
    format = "ics"
    charset = "utf-8"

    def render(self, data, accepted_media_type=None, renderer_context=None):
        if isinstance(data, str):
            return data.encode(self.charset)
        # error payloads from the exception handler
        return json.dumps(data).encode(self.charset)
