"""Static event content shown on the details page."""

from event_access.domain.event import EventDetails, Venue

_ADDRESS = "398 Bluefield Drive, San Jose, CA 95136"

EVENT = EventDetails(
    title="🪔 गृह प्रवेश समारोह 🪔",
    subtitle="Griha Pravesh Ceremony / House warming ceremony",
    tagline="Join us in celebrating this auspicious occasion",
    date="Sunday, December 14th, 2025",
    timezone_note="Timings in PST",
    venue=Venue(
        address_lines=("398 Bluefield Drive", "San Jose, CA 95136"),
        parking="Available on premises",
        google_maps_url="https://maps.google.com/?q=" + _ADDRESS.replace(" ", "+"),
        apple_maps_url="https://maps.apple.com/?address="
        + _ADDRESS.replace(" ", "+"),
        map_embed_url=(
            "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3"
            "!1d3175.0353355620023!2d-121.85125252370437!3d37.27058917211692"
            "!2m3!1f0!2f0!3f0!3m2!1i1024!2i768!4f13.1!3m3!1m2"
            "!1s0x808e3236c44e969f%3A0x9b68f34fb35b6afb"
            "!2s398%20Bluefield%20Dr%2C%20San%20Jose%2C%20CA%2095136"
            "!5e0!3m2!1sen!2sus!4v1765432006867!5m2!1sen!2sus"
        ),
    ),
    blessing="🕉️ May Lord Ganesha bless this home 🕉️",
    host_message=(
        "With hearts full of gratitude and joy, we invite you to bless our new "
        "home with your presence. As we embark on this new chapter of our lives, "
        "your blessings and good wishes mean the world to us. This house becomes "
        "a home only when filled with the warmth of loved ones like you. Join us "
        "for this sacred ceremony as we seek the blessings of Lord Ganesha and "
        "perform the traditional rituals that will sanctify our new dwelling."
    ),
    hosts="Chaithra & Vedant",
    closing_line="सर्वे भवन्तु सुखिनः",
    closing_translation="May all be happy and prosperous",
)
