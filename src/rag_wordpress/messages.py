"""Fixed user-facing texts.

The assistant answers in Bulgarian, the language of the indexed site.
"""

QUERY_TOO_SHORT = "Моля, задайте по-конкретен въпрос (поне 3 символа)."

NO_MATCHING_POSTS = "Не открих публикации, свързани с вашето търсене."

NO_RELEVANT_INFO = (
    "За съжаление не намерих релевантна информация по този въпрос "
    "в публикациите на PostVai.com. Моля, опитайте с различни ключови думи."
)

TECHNICAL_ERROR = "Възникна техническа грешка при търсенето. Моля, опитайте отново."

RESULTS_BANNER = (
    "🔍 Намерих {count} релевантни публикации, "
    "които може да отговорят на въпроса ви:"
)

NO_SUMMARY = "Няма налично резюме."

SOURCES_FOOTER = "\n📚 За пълна информация, моля посетете линковете към публикациите."

SOURCES_HEADING = "Източници от PostVai.com:"

RELEVANCE_LABEL = "Релевантност"

DATE_LABEL = "Дата"

QUESTION_LENGTH_HINT = "Въпросът трябва да е поне {min_length} символа"
