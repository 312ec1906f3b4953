"""Main entry point for the NPC decipher utility."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional
from shared.config.config import config
from shared.domain.consts import ResultStatus, NO_RESULT_MARKER
from decipher.infrastructure.passwords_table import load_passwords_table
from decipher.services.formatter import decipher_text
from decipher.services.hash_generator import generate_precomputed_hashes
from client.infrastructure.decipher_client import DecipherClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

USAGE = (
    "Usage:\n"
    "  python main.py <input_file>           decipher hashes at the end of each line\n"
    "  python main.py --count                print the number of known passwords\n"
    "  python main.py --generate [wordlists] build the precomputed hashes file"
)


def read_input_file(filename: str) -> str:
    """
    Read the text to decipher.
    
    Exits with code 1 if the file is missing or unreadable.
    """
    try:
        with open(filename, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        logger.error(f"Input file not found: {filename}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error reading input file: {e}")
        sys.exit(1)


def write_output(result: str) -> bool:
    """
    Print the result and copy it to config.OUTPUT_FILE when set.
    
    Returns:
        False if the output file could not be written.
    """
    print(result, end="" if result.endswith("\n") else "\n")
    
    if not config.OUTPUT_FILE:
        return True
    
    output_path = Path(config.OUTPUT_FILE)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(result)
    except Exception as e:
        logger.error(f"Failed to write output file: {e}")
        return False
    return True


async def decipher_file(input_file: str) -> int:
    """
    Decipher an input file locally or through the remote service.
    
    Returns:
        Process exit code.
    """
    text = read_input_file(input_file)
    
    if config.DECIPHER_URL:
        logger.info(f"Deciphering {input_file} via {config.DECIPHER_URL}")
        client = DecipherClient(config.DECIPHER_URL)
        try:
            response = await client.decipher(text)
        finally:
            await client.close()
        
        if response.status == ResultStatus.ERROR:
            logger.error(f"Decipher service failed: {response.error_message}")
            return 1
        result: Optional[str] = response.result
    else:
        table = load_passwords_table(config.PASSWORDS_FILE)
        outcome = decipher_text(table, text)
        result = outcome.result
    
    if not write_output(result if result is not None else NO_RESULT_MARKER):
        return 1
    return 0


async def print_password_count() -> int:
    """Print how many passwords are known. Returns process exit code."""
    if config.DECIPHER_URL:
        client = DecipherClient(config.DECIPHER_URL)
        try:
            count = await client.get_password_count()
        finally:
            await client.close()
        if count is None:
            return 1
    else:
        count = load_passwords_table(config.PASSWORDS_FILE).count
    
    print(f"{count} passwords known")
    return 0


def generate(wordlist_dir: str) -> int:
    """Build config.PASSWORDS_FILE from the wordlists. Returns process exit code."""
    try:
        written = generate_precomputed_hashes(wordlist_dir, config.PASSWORDS_FILE)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    logger.info(f"Done! {written} hashes written to {config.PASSWORDS_FILE}")
    return 0


async def main():
    """Main execution function."""
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)
    
    command = sys.argv[1]
    
    if command == "--count":
        sys.exit(await print_password_count())
    
    if command == "--generate":
        wordlist_dir = sys.argv[2] if len(sys.argv) > 2 else config.WORDLIST_DIR
        sys.exit(generate(wordlist_dir))
    
    if command.startswith("--"):
        print(USAGE)
        sys.exit(1)
    
    sys.exit(await decipher_file(command))


if __name__ == "__main__":
    asyncio.run(main())
