"""Guest list and program schedule loaded at startup."""

from event_access.domain.guests import AccessLevel, GuestRecord, Role, ScheduleEntry

GUEST_CODES: dict[str, GuestRecord] = {
    "011387": GuestRecord("Prathamesh Pawar", Role.VIP),
    "120193": GuestRecord("Varshini and Kiran", Role.VIP),
    "141097": GuestRecord("Terkar family", Role.VIP),
    "042693": GuestRecord("Vedant Kawale", Role.VIP),
    "150467": GuestRecord("Gayathri and Venkatesh", Role.VIP),
    "042196": GuestRecord("Varsha and Sourabh", Role.VIP),
    "070192": GuestRecord("Aishwarya", Role.VIP),
    "030893": GuestRecord("Mohini and Ajinkya", Role.VIP),
    "061193": GuestRecord("Estmeed Guest", Role.VIP),
    "122092": GuestRecord("Manpreet and Niranjan", Role.FRIEND),
    "022591": GuestRecord("Sowmya and Mohit", Role.FRIEND),
    "110392": GuestRecord("Neha and Ameya", Role.FRIEND),
    "041299": GuestRecord("Atharv Pawar", Role.FRIEND),
    "091597": GuestRecord("Vaishnavi and Vedant", Role.FRIEND),
    "090796": GuestRecord("Simran and Satnam", Role.FRIEND),
    "PSDVIN": GuestRecord("Vinay Polisetty", Role.FRIEND),
    "TDSCKS": GuestRecord("Keerthi Singri", Role.FRIEND),
    "HOMIES": GuestRecord("Dear Guest", Role.FRIEND),
    "PSDS25": GuestRecord("Dear Guest", Role.FRIEND),
}

PROGRAM_SCHEDULE: tuple[ScheduleEntry, ...] = (
    ScheduleEntry("6:30 AM", "📿 Puja Begins", AccessLevel.VIP),
    ScheduleEntry("11:15 AM", "🫖 Light Refreshments", AccessLevel.PUBLIC),
    ScheduleEntry("11:30 AM", "🏠 House Tour & Blessings", AccessLevel.PUBLIC),
    ScheduleEntry("12:30 PM - 2:00 PM", "🍛 Lunch & Celebration", AccessLevel.PUBLIC),
)
