"""Script assistance agent: one suggestion for a scene script."""

from .base import BaseAgent

SYSTEM_PROMPT = """You are an editor helping someone write the narration for a short video.
You are shown the script of one scene. Reply with a single concrete suggestion
that would improve it: a stronger hook, a transition, supporting visuals, or a
call to action. Answer in one or two sentences of plain text, no lists and no
markdown."""


class ScriptAssistAgent(BaseAgent[str, str]):
    """Suggests an improvement for a scene script."""

    max_tokens = 200
    temperature = 0.8

    @property
    def name(self) -> str:
        return "ScriptAssistAgent"

    @property
    def system_prompt(self) -> str:
        return SYSTEM_PROMPT

    def run(self, input_data: str) -> str:
        """Return one suggestion for the given script text."""
        script = input_data.strip()
        if script:
            prompt = f"Scene script:\n\n{script}"
        else:
            prompt = "The scene has no script yet. Suggest how it could open."
        return self._create_message(prompt).strip()

    def suggest(self, script: str) -> str:
        return self.run(script)
