# demo.py

import argparse
import asyncio
from datetime import datetime

from pinline import FunctionCommand, Prompt, PromptConfig

async def produce(prompt: Prompt, interval: float) -> None:
    """Print a timestamped line every interval seconds."""
    console = prompt.console()
    tick = 0
    while True:
        tick += 1
        now = datetime.now().strftime('%H:%M:%S')
        console.print(f"[dim]{now}[/dim] tick [bold cyan]{tick}[/bold cyan]")
        await asyncio.sleep(interval)

async def run(args) -> None:
    prompt = None

    def echo(argv):
        prompt.append_output(' '.join(argv) + '\n')

    async def status(argv):
        await prompt.set_status(' '.join(argv))

    def count(argv):
        total = int(argv[0]) if argv else 10
        for i in range(1, total + 1):
            prompt.append_output(f"line {i} of {total}\n")

    def quit_(argv):
        prompt.interrupt()

    commands = [
        FunctionCommand('echo', echo),
        FunctionCommand('status', status),
        FunctionCommand('count', count),
        FunctionCommand('quit', quit_),
    ]
    config = PromptConfig(logging_enabled=args.enable_logging, log_file=args.log_file)
    prompt = Prompt(commands, config=config)

    await prompt.run()
    producer = asyncio.create_task(produce(prompt, args.interval))
    try:
        await prompt.wait_closed()
    finally:
        producer.cancel()
        await prompt.close()

def main():
    parser = argparse.ArgumentParser(description='pinline demo')
    parser.add_argument('--interval', type=float, default=1.0,
        help='Seconds between generated output lines')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path')
    args = parser.parse_args()
    asyncio.run(run(args))

if __name__ == "__main__":
    main()
