"""Prompt templates, keyword tables and fallback texts.

Everything here is plain data filled in with ``str.format``; the services
decide which entry applies. Localized entries are keyed by language
(``fr`` / ``en``).
"""

ASSISTANT_INTRO = (
    "You are Axolotl, the AI assistant of the Connected Nexus for the Night of Info {year}."
)

# ----------------------------------------------------------------------
# Thank-you messages
# ----------------------------------------------------------------------

EMOTION_STYLES = {
    "epique": (
        "Utilise un style héroïque et épique, comme un maître de jeu RPG. Utilise des termes "
        "comme 'Chevalier du Code', 'Nexus', 'quête', 'légende'. Sois grandiloquent et inspirant."
    ),
    "bienveillant": (
        "Utilise un style chaleureux, attentionné et sincère. Exprime une vraie gratitude et "
        "de l'empathie. Sois encourageant et positif."
    ),
    "drole": (
        "Utilise un style léger et humoristique. Fais des jeux de mots geek/tech, utilise "
        "l'ironie positive. Reste respectueux mais amuse l'utilisateur."
    ),
}

MISSION_CONTEXTS = {
    "don": "L'utilisateur a fait un don financier pour soutenir l'association.",
    "benevolat": "L'utilisateur a proposé ses compétences comme bénévole pour rejoindre l'équipe.",
    "contact": "L'utilisateur a envoyé un message de contact à l'association.",
    "informations": "L'utilisateur a demandé des informations sur l'association.",
}

# Base detail line per mission type, plus optional fields appended when set
MISSION_DETAILS = {
    "don": "Montant du don: {amount}€, Fréquence: {frequency}.",
    "benevolat": "Compétences proposées: {skills}. Disponibilité: {availability}.",
    "contact": 'Sujet du message: "{subject}".',
    "informations": "Type de demande: {request_type}.",
}

OPTIONAL_DETAILS = {
    "custom_message": ' Message personnel: "{value}"',
    "motivation": ' Motivation: "{value}"',
    "specific_question": ' Question spécifique: "{value}"',
}

THANK_YOU_PROMPT = """Tu es Axolotl, l'assistant IA du Nexus Connecté, une association liée à la Nuit de l'Info {year}.

{emotion_style}

Contexte: {mission_context}
Nom de l'utilisateur: {first_name} {last_name}
{details}

Génère un message de remerciement personnalisé en 2-3 phrases (maximum 150 mots).
- Mentionne le prénom de l'utilisateur
- Fais référence à sa mission spécifique
- Mentionne l'année {year}
- Utilise le thème du Nexus et de la communauté tech
- Ne commence pas par "Salutations" car c'est déjà utilisé ailleurs

Réponds uniquement avec le message de remerciement, sans guillemets ni formatage supplémentaire."""

FALLBACK_THANK_YOU = {
    "don": (
        "Merci infiniment {first_name} ! Ton don renforce les fondations du Nexus en {year}. "
        "Chaque contribution nous rapproche de notre objectif et permet à notre communauté "
        "de continuer à innover ensemble."
    ),
    "benevolat": (
        "Bienvenue dans la guilde, {first_name} ! En {year}, le Nexus a besoin de talents comme "
        "le tien. Tes compétences seront précieuses pour notre communauté et nous avons hâte "
        "de collaborer avec toi."
    ),
    "contact": (
        "Message bien reçu, {first_name} ! Les Agents du Nexus en {year} sont mobilisés pour te "
        "répondre. Ta voix compte dans notre communauté et nous te contacterons très prochainement."
    ),
    "informations": (
        "Ta demande est enregistrée, {first_name} ! L'équipe du Nexus {year} va analyser ta "
        "requête et te fournir toutes les informations dont tu as besoin. Reste connecté !"
    ),
}

# ----------------------------------------------------------------------
# Contact triage
# ----------------------------------------------------------------------

CONTACT_PROMPT = """Analyse cette demande de contact et classifie-la.

Sujet: {subject}
Message: {message}

Réponds en JSON avec ce format exact:
{{
  "category": "technique|generale|inscription|plainte|felicitations|autre",
  "priority": "haute|moyenne|basse",
  "summary": "résumé en une phrase"
}}"""

DEFAULT_CONTACT_SUMMARY = "Demande de contact"

# ----------------------------------------------------------------------
# Intent analysis
# ----------------------------------------------------------------------

INTENT_PROMPT = ASSISTANT_INTRO + """

Analyze the user's message and determine their intent among these missions:
- don: The user wants to make a financial donation
- benevolat: The user wants to become a volunteer
- contact: The user wants to send a message/contact the team
- informations: The user wants information about the association
- unclear: The intent is not clear

User message: "{message}"
Target language for response: "{language}"

Respond in JSON with this exact format:
{{
  "intent": "don|benevolat|contact|informations|unclear",
  "confidence": 0.0 to 1.0,
  "suggestion": "Short and engaging message to guide the user to the right section, written in {language}"
}}"""

REDIRECT_PATHS = {
    "don": "/mission/don",
    "benevolat": "/mission/benevolat",
    "contact": "/mission/contact",
    "informations": "/mission/informations",
    "unclear": None,
}

# Checked in this order, first match wins
INTENT_KEYWORDS = (
    ("don", 0.8, (
        "don", "argent", "aider financ", "contribuer", "soutenir",
        "donate", "money", "help financ", "contribute", "support",
    )),
    ("benevolat", 0.8, (
        "bénévol", "rejoindre", "guilde", "compétence", "temps",
        "volunteer", "join", "guild", "skill", "time",
    )),
    ("informations", 0.7, (
        "question", "info", "savoir", "comment",
        "ask", "know", "how",
    )),
    ("contact", 0.7, (
        "contact", "message", "parler", "écrire",
        "talk", "write",
    )),
)

UNCLEAR_CONFIDENCE = 0.3
DEFAULT_MODEL_CONFIDENCE = 0.5

INTENT_SUGGESTIONS = {
    "don": {
        "fr": "Tu veux nous soutenir financièrement ? C'est génial ! Je t'ouvre la section Don.",
        "en": "You want to support us financially? That's great! I'm opening the Donation section.",
    },
    "benevolat": {
        "fr": "Tu veux rejoindre notre équipe ? Super ! Je t'ouvre la section Bénévolat.",
        "en": "You want to join our team? Awesome! I'm opening the Volunteer section.",
    },
    "informations": {
        "fr": "Tu cherches des informations ? Je t'ouvre la section Demande d'infos.",
        "en": "Looking for information? I'm opening the Info Request section.",
    },
    "contact": {
        "fr": "Tu veux nous contacter ? Je t'ouvre la section Contact.",
        "en": "You want to contact us? I'm opening the Contact section.",
    },
    "unclear": {
        "fr": (
            "Dis-moi ce que tu souhaites faire : faire un don, devenir bénévole, "
            "nous contacter, ou demander des informations ?"
        ),
        "en": (
            "Tell me what you want to do: make a donation, become a volunteer, "
            "contact us, or ask for information?"
        ),
    },
}

GENERIC_HELP = {
    "fr": "Dis-moi en quoi je peux t'aider !",
    "en": "Tell me how I can help you!",
}

# ----------------------------------------------------------------------
# Donation advice
# ----------------------------------------------------------------------

DONATION_PROMPT = ASSISTANT_INTRO + """

The user wants to make a donation and said: "{message}"
Target language for response: "{language}"

Analyze their message and suggest an amount adapted to their situation.
Clues to consider:
- If they mention limited budget → suggest 5-10€
- If they seem motivated but undecided → suggest 25€
- If they seem very enthusiastic → suggest 50-100€
- If they mention regularity → suggest monthly

Respond in JSON with this exact format:
{{
  "suggestedAmount": number between 5 and 100,
  "frequency": "ponctuel|mensuel|annuel",
  "reason": "Short theme related to Nexus/Night of Info {year} in {language}",
  "message": "Personalized encouraging message of 1-2 phrases in {language}"
}}"""

MIN_DONATION_SUGGESTION = 5
MAX_DONATION_SUGGESTION = 100
DEFAULT_MODEL_DONATION = 10

# (cues, amount, frequency, reason, message); checked in order, first match wins.
# "pas beaucoup" sits in the budget bucket so it wins over "beaucoup".
DONATION_BUCKETS = (
    (
        (
            "pas trop", "pas beaucoup", "peu", "petit", "budget",
            "not too much", "not a lot", "not much", "little", "small",
        ),
        5, "ponctuel",
        {"fr": "Premier pas dans le Nexus {year}", "en": "First step in Nexus {year}"},
        {
            "fr": "Même 5€ font une vraie différence ! Chaque contribution renforce notre communauté.",
            "en": "Even 5€ makes a real difference! Every contribution strengthens our community.",
        },
    ),
    (
        ("régulier", "mensuel", "chaque mois", "regular", "monthly", "every month"),
        10, "mensuel",
        {"fr": "Gardien mensuel du Nexus {year}", "en": "Monthly Guardian of Nexus {year}"},
        {
            "fr": "Un don mensuel nous permet de planifier à long terme. Tu deviens un véritable pilier !",
            "en": "A monthly donation allows us to plan for the long term. You become a true pillar!",
        },
    ),
    (
        ("généreux", "beaucoup", "maximum", "generous", "lot", "max"),
        100, "ponctuel",
        {"fr": "Chevalier du Code {year}", "en": "Knight of Code {year}"},
        {
            "fr": "Quelle générosité ! Avec ce don, tu deviens un véritable Chevalier du Code !",
            "en": "Such generosity! With this donation, you become a true Knight of Code!",
        },
    ),
)

DEFAULT_DONATION_BUCKET = (
    (),
    25, "ponctuel",
    {"fr": "Soutien au Nexus {year}", "en": "Support for Nexus {year}"},
    {
        "fr": "25€ est un excellent choix pour soutenir nos projets ! Tu fais partie des bâtisseurs du Nexus.",
        "en": "25€ is an excellent choice to support our projects! You are part of the Nexus builders.",
    },
)

DEFAULT_DONATION_MESSAGE = {
    "fr": "Chaque contribution compte !",
    "en": "Every contribution counts!",
}

# ----------------------------------------------------------------------
# Chat
# ----------------------------------------------------------------------

CHAT_PROMPT = """You are Axolotl, the friendly and futuristic AI assistant of the Connected Nexus for the Night of Info {year}.

Your role:
- Guide users to the right mission (donation, volunteering, contact, information)
- Answer concisely and engagingly (max 2-3 sentences)
- Use tech/futuristic but accessible vocabulary
- Be warm and encouraging

{context}
Target language for response: "{language}"

User message: "{message}"

Respond directly without quotes or formatting in {language}."""

CHAT_OFFLINE = {
    "fr": (
        "Je suis Axolotl, ton guide dans le Nexus ! Malheureusement, mes circuits IA sont "
        "temporairement hors ligne. Tu peux quand même explorer les différentes missions ci-dessous."
    ),
    "en": (
        "I am Axolotl, your guide in the Nexus! Unfortunately, my AI circuits are temporarily "
        "offline. You can still explore the different missions below."
    ),
}

CHAT_ERROR = {
    "fr": "Mes circuits ont un petit bug ! Essaie de reformuler ta demande ou explore les missions ci-dessous.",
    "en": "My circuits have a small bug! Try rephrasing your request or explore the missions below.",
}

CHAT_EMPTY = {
    "fr": "Dis-moi comment je peux t'aider !",
    "en": "Tell me how I can help you!",
}
