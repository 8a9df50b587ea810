from typing import Literal

TMDB_BASE_URL = "https://api.themoviedb.org/3"

# Languages accepted by the search endpoint
SearchLanguage = Literal["en", "fr"]

DEFAULT_LANGUAGE = "en"
