"""Data loading and parsing utilities."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from fuzzylp.models import Product, Resource

logger = logging.getLogger("fuzzylp.utils")


def load_json(filepath: str | Path) -> Dict[str, Any]:
    """
    Load JSON data from a file.
    
    Args:
        filepath: Path to the JSON file
    
    Returns:
        Parsed JSON data
    
    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file is not valid JSON
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")
    
    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)


def parse_products(problem_data: Dict[str, Any]) -> List[Product]:
    """
    Parse products from JSON data.
    
    Args:
        problem_data: JSON data containing a 'products' list
    
    Returns:
        List of Product objects in file order
    """
    if "products" not in problem_data:
        raise ValueError("Invalid problem data: 'products' key missing")
    
    products = []
    for index, product_data in enumerate(problem_data["products"]):
        try:
            products.append(Product.from_dict(product_data))
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Malformed product #{index + 1}: {e}") from e
    
    logger.debug(f"Parsed {len(products)} products")
    return products


def parse_resources(problem_data: Dict[str, Any]) -> List[Resource]:
    """
    Parse resources from JSON data.
    
    Args:
        problem_data: JSON data containing a 'resources' list
    
    Returns:
        List of Resource objects in file order
    """
    if "resources" not in problem_data:
        raise ValueError("Invalid problem data: 'resources' key missing")
    
    resources = []
    for index, resource_data in enumerate(problem_data["resources"]):
        try:
            resources.append(Resource.from_dict(resource_data))
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Malformed resource #{index + 1}: {e}") from e
    
    logger.debug(f"Parsed {len(resources)} resources")
    return resources


def load_problem(filepath: str | Path) -> Tuple[List[Product], List[Resource]]:
    """Load and parse a problem file into products and resources."""
    data = load_json(filepath)
    return parse_products(data), parse_resources(data)


def save_text(text: str, filepath: str | Path) -> None:
    """
    Save a model text to a file.
    
    Args:
        text: Text to save, written verbatim
        filepath: Path to save to
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(text)
    
    logger.debug(f"Saved model text to {filepath}")


def save_json(data: Any, filepath: str | Path) -> None:
    """
    Save data to a JSON file.
    
    Args:
        data: Data to save (must be JSON-serializable)
        filepath: Path to save to
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    
    logger.debug(f"Saved data to {filepath}")
