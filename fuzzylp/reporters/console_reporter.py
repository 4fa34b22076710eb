"""Result reporting utilities."""

from typing import Sequence

from fuzzylp.models import Product
from fuzzylp.synthesis import SynthesisResult


def print_results(result: SynthesisResult) -> None:
    """
    Print a synthesis result to console.
    
    Args:
        result: The synthesis result to print
    """
    stats = result.statistics
    
    print("\n" + "=" * 60)
    print("LP MODEL")
    print("=" * 60)
    
    print(f"\nAlpha Level: {result.alpha:.2f}")
    print(f"Variables: {stats['products']}")
    print(f"Resources: {stats['resources']}")
    print(f"Resource Constraints: {stats['constraints']}")
    print(f"Nonzero Terms: {stats['terms']}")
    print(f"Fuzzy Capacities: {stats['fuzzy_capacities']}")
    print(f"Model Valid: {result.validation.is_valid}")
    
    if stats["omitted_resources"]:
        print("\n--- Omitted Resources (no usage) ---")
        for name in stats["omitted_resources"]:
            print(f"  - {name}")
    
    if stats["unconstrained_products"]:
        print("\n--- Products Bounded Only by Demand ---")
        for name in stats["unconstrained_products"]:
            print(f"  - {name}")
    
    if result.validation.violations:
        print("\n--- Violations ---")
        for violation in result.validation.violations:
            print(f"  ! {violation}")
    
    if result.validation.warnings:
        print("\n--- Warnings ---")
        for warning in result.validation.warnings:
            print(f"  ! {warning}")
    
    print("\n--- Model Text ---\n")
    print(result.text, end="")
    print("=" * 60)


def format_alpha_table(products: Sequence[Product], alpha: float) -> str:
    """
    Format the alpha-cut intervals of product demand and price.
    
    Args:
        products: Products to tabulate
        alpha: Confidence level
    
    Returns:
        Formatted string table
    """
    lines = [f"Alpha-cut intervals at alpha = {alpha:.2f}"]
    
    for product in products:
        demand = product.demand.alpha_cut(alpha)
        price = product.price.alpha_cut(alpha)
        lines.append(
            f"  {product.name}: demand [{demand.lower:.2f}, {demand.upper:.2f}], "
            f"price [{price.lower:.2f}, {price.upper:.2f}]"
        )
    
    return "\n".join(lines)
