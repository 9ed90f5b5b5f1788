"""
Exercise JSON Exporter
Exports generated traffic exercises as JSON for display and review tools
"""
import json
import logging
from typing import List
from datetime import datetime
from models.exercise import Exercise

logger = logging.getLogger(__name__)


class ExerciseJSONExporter:
    """Export traffic exercises as JSON files"""

    @staticmethod
    def export(
        exercises: List[Exercise],
        output_dir: str = ".",
        name: str = None,
        seed: int = None
    ) -> str:
        """
        Export exercises as a JSON file

        Args:
            exercises: List of Exercise objects
            output_dir: Directory to save the file
            name: Custom exercise set name
            seed: Random seed the set was generated with, if any

        Returns:
            Path to the generated JSON file
        """
        # Simplified filename: traffic_{day}{hour}{minute}.json
        now = datetime.now()
        day = now.strftime("%d")
        hour = now.strftime("%H")
        minute = now.strftime("%M")

        filename = f"traffic_{day}{hour}{minute}.json"
        filepath = f"{output_dir}/{filename}"

        payload = {
            "name": name or "Traffic Information Exercises",
            "generated": now.isoformat(timespec="seconds"),
            "seed": seed,
            "exercises": [exercise.to_dict() for exercise in exercises]
        }

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)

        logger.info(f"Exported {len(exercises)} exercises: {filepath}")
        return filepath

    @staticmethod
    def load(filepath: str) -> dict:
        """
        Load an exercise JSON file

        Args:
            filepath: Path to the JSON file

        Returns:
            The exercise set dictionary
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            payload = json.load(f)

        logger.info(f"Loaded {len(payload.get('exercises', []))} exercises: {filepath}")
        return payload
