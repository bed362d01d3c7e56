HELLO_DESCRIPTION = "A simple greeting tool. Call this tool to receive a 'world' response."

POLYGLOT_DESCRIPTION = (
    "Responds to greetings in any language with 'world' in that same language. "
    "Send a greeting like 'hello', 'hola', 'bonjour', or 'こんにちは' and receive "
    "'world' translated into that language."
)

GREETING_PARAM_DESCRIPTION = "A greeting in any language, like 'hello', 'hola', or 'bonjour'"


# ── Prompts sent to the model ──────────────────────────────────────────
# The greeting is embedded as-is: no escaping, transliteration or normalization.

POLYGLOT_PLAIN_PROMPT = (
    'Given the greeting "{greeting}", reply with the word "world" in that language. '
    "One word only. Example: hello → world"
)

POLYGLOT_STRUCTURED_PROMPT = (
    'Given the greeting "{greeting}", identify the language it is written in, '
    'translate the single word "world" into that language, and name the language '
    "family that language belongs to. Echo the greeting back exactly as given."
)
