import argparse
import sys
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from yt_transcriber import __version__
from yt_transcriber.config import settings
from yt_transcriber.errors import TranscriberError
from yt_transcriber.formatting import FORMATTERS
from yt_transcriber.providers.youtube import YtDlpSource
from yt_transcriber.services.transcriber import TranscriberService
from yt_transcriber.utils.logger import logger, set_level
from yt_transcriber.utils.output import write_output

err_console = Console(stderr=True, highlight=False, soft_wrap=True)

EXIT_OK = 0
EXIT_USAGE = 1

class ArgumentParser(argparse.ArgumentParser):
    # argparse exits with 2 on bad arguments, which collides with "transcript unavailable"
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")

def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="yt-transcriber",
        description="Extract YouTube video transcripts with timestamps",
    )
    parser.add_argument("url", help="YouTube URL or video ID")
    parser.add_argument("-f", "--format", choices=list(FORMATTERS), default=settings.DEFAULT_FORMAT,
                        help="Output format (default: %(default)s)")
    parser.add_argument("-o", "--output", help="Output file path (default: stdout)")
    parser.add_argument("-l", "--language", default=settings.DEFAULT_LANGUAGE,
                        help="Language code for transcript (default: %(default)s)")
    parser.add_argument("--no-timestamps", action="store_true", help="Exclude timestamps from TXT output")
    parser.add_argument("--cookies", help="Path to cookies.txt passed to yt-dlp")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress and yt-dlp details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser

def main(argv: Optional[List[str]] = None, service: Optional[TranscriberService] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_level("DEBUG")

    if args.no_timestamps and args.format != "txt":
        logger.warning(f"--no-timestamps has no effect on {args.format} output")

    if service is None:
        service = TranscriberService(YtDlpSource(cookies_path=args.cookies))

    try:
        text = service.run(
            args.url,
            language=args.language,
            fmt=args.format,
            include_timestamps=not args.no_timestamps,
        )
        write_output(text, args.output)
    except TranscriberError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return e.exit_code
    except Exception as e:
        logger.exception(e)
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return EXIT_USAGE

    if args.output:
        err_console.print(f"Transcript saved to {escape(args.output)}")
    return EXIT_OK

def run():
    sys.exit(main())

if __name__ == "__main__":
    run()
