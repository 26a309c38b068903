"""
Language-model features: the AI Chef and micronutrition analysis.

Both report DependencyUnavailableError (503) when the model is not
configured instead of failing at startup.
"""

import logging

from adapters.document_store import DocumentStore
from adapters.llm_adapter import LanguageModelClient
from repositories import PantryRepository

logger = logging.getLogger("pantrykeeper.assistant")

CHEF_PROMPT = (
    "You are an AI Chef assistant. The user has these ingredients in their "
    "pantry: {ingredients}. Recommend recipes based on their query and pantry "
    "ingredients. If you need more ingredients, suggest what they need to buy."
)

NUTRITION_PROMPT = (
    "You are a nutrition expert. Provide detailed micronutritional analysis for "
    "the food item. Include nutrients, potential health effects, and any relevant "
    "research. Keep it factual and scientific."
)


class AIChefService:
    @staticmethod
    def query(store: DocumentStore, llm: LanguageModelClient, user_id: str, query: str) -> str:
        """Answer a cooking question with the user's pantry as context"""
        llm.ensure_available("AI Chef")

        names = [
            item.get("name", "")
            for item in PantryRepository(store).get_children(user_id)
        ]
        system = CHEF_PROMPT.format(ingredients=", ".join(n for n in names if n))
        answer = llm.chat(system, query, feature="AI Chef")
        logger.info(f"ai_chef_answered user_id={user_id} pantry_items={len(names)}")
        return answer

    @staticmethod
    def analyze_micronutrition(llm: LanguageModelClient, food_name: str) -> str:
        return llm.chat(
            NUTRITION_PROMPT,
            f"Analyze micronutrients for: {food_name}",
            feature="Micronutrition analysis",
        )
