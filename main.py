import asyncio
import sys


async def main(workflow_name: str) -> int:
    """Main entry point for running workflows."""
    if workflow_name == "import_parto":
        from workflows.import_parto import main as import_parto
        sys.argv = [sys.argv[0]] + sys.argv[2:]
        return await import_parto()

    print(f"Unknown workflow: {workflow_name}")
    return 1


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python main.py <workflow_name> [options]")
        sys.exit(1)

    workflow_name = sys.argv[1]
    sys.exit(asyncio.run(main(workflow_name)))
