"""Fixed pick-lists offered by the metadata form."""

GENRES = (
    "Pop",
    "Rock",
    "Hip-Hop",
    "R&B",
    "Electronic",
    "Dance",
    "Country",
    "Jazz",
    "Classical",
    "Metal",
    "Folk",
    "Reggae",
    "Blues",
    "Soul",
    "Funk",
    "Indie",
    "Alternative",
    "Latin",
    "World",
    "Other",
)

LANGUAGES = (
    "English",
    "Spanish",
    "French",
    "German",
    "Italian",
    "Portuguese",
    "Japanese",
    "Korean",
    "Chinese",
    "Hindi",
    "Arabic",
    "Other",
)

TERRITORIES = (
    "Worldwide",
    "United States",
    "United Kingdom",
    "Canada",
    "Australia",
    "Germany",
    "France",
    "Spain",
    "Italy",
    "Japan",
    "South Korea",
    "Brazil",
    "Mexico",
    "Custom",
)
