"""User-facing Swedish strings."""

# ── Ad prompt ───────────────────────────────────────────────────────────────

AD_PROMPT_HEADER = "Skapa en bilannons för följande bil:"
AD_PROMPT_CLOSING = (
    "Generera en professionell och säljande annons baserat på denna information."
)

DEFAULT_SYSTEM_PROMPT = """\
Du är en expert på att skriva säljande bilannonser på svenska. 
Skapa en professionell och engagerande annons baserat på bilinformationen.
Annonsen ska vara:
- Tydlig och välstrukturerad
- Säljande men ärlig
- Innehålla emojis för visuell appeal
- Inkludera en uppmaning att kontakta säljaren"""

# ── Errors ──────────────────────────────────────────────────────────────────

MISSING_API_KEY = "API-nyckel saknas"
INVALID_API_KEY = "Ogiltig API-nyckel. Kontrollera din OpenAI API-nyckel."
RATE_LIMITED = "För många förfrågningar. Vänta en stund och försök igen."
UPSTREAM_ERROR = "Fel vid anrop till AI-tjänsten"
UNKNOWN_ERROR = "Okänt fel"

CHAT_FALLBACK = "Tyvärr uppstod ett fel. Försök igen."
