import os
import re
import importlib.util
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from core.result import ActionResult, Err
from logger_config import get_logger

logger = get_logger(__name__)

DEFAULT_SKILLS_DIR = Path(__file__).resolve().parent
DEFAULT_PRIORITY = 100

class Action:
    """A text-triggered action loaded from a skill folder."""
    def __init__(
        self,
        name: str,
        description: str,
        path: str,
        validate: Callable[[str], bool],
        handler: Callable[[str], ActionResult],
        similes: Optional[List[str]] = None,
        examples: Optional[List[List[Dict[str, Any]]]] = None,
        priority: int = DEFAULT_PRIORITY,
        failure_label: Optional[str] = None,
    ):
        self.name = name
        self.description = description
        self.path = path
        self.validate = validate
        self.handler = handler
        self.similes = similes or []
        self.examples = examples or []
        self.priority = priority
        self.failure_label = failure_label or name.capitalize()

    def __repr__(self) -> str:
        return f"Action(name={self.name!r}, priority={self.priority})"

class SkillRegistry:
    """Registry for discovering actions and dispatching messages to them.

    Each action lives in its own folder with a SKILL.md (frontmatter holds
    name, description, similes, priority and failure_label) and a
    scripts/main.py that defines validate(text), execute(text) and
    optionally EXAMPLES.

    Messages are dispatched by checking predicates in ascending priority
    (ties broken by name). The shipped order is TRANSFER (10),
    BALANCE (20), CONFIRM (30).
    """

    def __init__(self, skills_dir: Optional[str] = None):
        self.skills_dir = str(skills_dir or DEFAULT_SKILLS_DIR)
        self._skills: Dict[str, Action] = {}
        self.discover_skills()

    def discover_skills(self) -> None:
        """Scans the skills directory for subdirectories with SKILL.md."""
        if not os.path.exists(self.skills_dir):
            logger.warning(f"Skills directory not found: {self.skills_dir}")
            return

        for entry in sorted(os.listdir(self.skills_dir)):
            skill_path = os.path.join(self.skills_dir, entry)
            if os.path.isdir(skill_path):
                skill_md_path = os.path.join(skill_path, "SKILL.md")
                if os.path.exists(skill_md_path):
                    self._load_skill(skill_path, skill_md_path)

    def _load_skill(self, skill_path: str, md_path: str) -> None:
        """Parses SKILL.md, loads the script and registers the action."""
        try:
            with open(md_path, "r", encoding="utf-8") as f:
                content = f.read()

            metadata = self._parse_metadata(content)
            name = (metadata.get("name") or os.path.basename(skill_path)).upper()

            script_path = os.path.join(skill_path, "scripts", "main.py")
            if not os.path.exists(script_path):
                logger.error(f"No scripts/main.py found for skill '{name}'")
                return

            module = self._load_module(name, script_path)
            for attr in ("validate", "execute"):
                if not callable(getattr(module, attr, None)):
                    logger.error(f"Script {script_path} missing {attr} function.")
                    return

            similes = [s.strip() for s in metadata.get("similes", "").split(",") if s.strip()]

            self._skills[name] = Action(
                name=name,
                description=metadata.get("description", "No description provided."),
                path=skill_path,
                validate=module.validate,
                handler=module.execute,
                similes=similes,
                examples=getattr(module, "EXAMPLES", []),
                priority=int(metadata.get("priority", DEFAULT_PRIORITY)),
                failure_label=metadata.get("failure_label"),
            )
            logger.info(f"Discovered skill: {name}")

        except Exception as e:
            logger.error(f"Error loading skill at {skill_path}: {e}")

    def _load_module(self, name: str, script_path: str):
        spec = importlib.util.spec_from_file_location(f"sei_mate_skill_{name.lower()}", script_path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    def _parse_metadata(self, content: str) -> Dict[str, str]:
        """Parses metadata from the YAML frontmatter."""
        metadata = {}
        frontmatter_match = re.search(r"^---\s*\n(.*?)\n---\s*\n", content, re.DOTALL)
        if frontmatter_match:
            for line in frontmatter_match.group(1).split("\n"):
                if ":" in line:
                    key, val = line.split(":", 1)
                    metadata[key.strip().lower()] = val.strip()
        return metadata

    def get(self, name: str) -> Optional[Action]:
        return self._skills.get(name.upper())

    def actions(self) -> List[Action]:
        """Returns the actions in dispatch order."""
        return sorted(self._skills.values(), key=lambda a: (a.priority, a.name))

    def match(self, text: str) -> Optional[Action]:
        """Returns the first action whose predicate accepts `text`."""
        for action in self.actions():
            try:
                if action.validate(text):
                    return action
            except Exception as e:
                logger.error(f"Predicate for {action.name} raised: {e}")
        return None

    def dispatch(self, text: str) -> ActionResult:
        """Runs the first matching action for `text`."""
        action = self.match(text)
        if action is None:
            return Err(action="NONE", kind="no_match", message="No action matched the message.")
        return self._run(action, text)

    def execute_skill(self, skill_name: str, text: str) -> ActionResult:
        """Runs a named action's handler directly, skipping its predicate."""
        action = self.get(skill_name)
        if action is None:
            logger.error(f"Skill '{skill_name}' not found.")
            return Err(action=skill_name.upper(), kind="no_match", message=f"Unknown action '{skill_name}'.")
        return self._run(action, text)

    def _run(self, action: Action, text: str) -> ActionResult:
        logger.info(f"Executing {action.name}")
        try:
            return action.handler(text)
        except Exception as e:
            logger.error(f"Error executing {action.name}: {e}")
            return Err(
                action=action.name,
                kind="handler_error",
                message=f"❌ {action.failure_label} failed: {str(e) or 'Unknown error'}",
            )

# Singleton instance
registry = SkillRegistry()
