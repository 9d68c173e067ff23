"""Running the selected bypass techniques and reporting what was found."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace

from .burp import generate_burp_project
from .client import HttpClient, NotForbiddenError, RequestError, verify_url
from .config import Config
from .models import BypassConfig, Result, URLParseError
from .reports import (
    contains_category,
    curl_command,
    python_request,
    save_forbidden_bypass,
    save_results,
)
from .techniques import Technique, get_techniques
from .useragent import get_random, get_random_by_category

_NOT_BYPASSED = (403, 0, 404)


def _format(result: Result) -> str:
    return (f"{result.url} ({result.status_code}) - "
            f"Technique: {result.technique}/{result.method}")


class Runner:
    """Drives one bypass run from a validated configuration."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.client: HttpClient | None = None

    def _pick_user_agent(self) -> str:
        if self.config.user_agent_type:
            return get_random_by_category(self.config.user_agent_type)
        return get_random()

    @staticmethod
    def _confirm(message: str) -> bool:
        print(f"Warning: {message}. Continue anyway? (y/n): ", end="", flush=True)
        try:
            answer = input()
        except EOFError:
            answer = ""
        return answer.strip() in ("y", "Y")

    def should_run(self, category: str) -> bool:
        """Tell whether a technique of this category is selected."""
        if self.config.all_techniques or not self.config.category:
            return True
        return contains_category(category, self.config.category)

    def _run_technique(self, technique: Technique, client: HttpClient,
                       base: BypassConfig) -> list[Result]:
        if self.config.verbose:
            print(f"Trying {technique.name} techniques...")
        config = base
        if self.config.random_user_agent:
            config = replace(base, user_agent=self._pick_user_agent())
        try:
            return technique.test(self.config.url, client, config)
        except URLParseError as exc:
            if self.config.verbose:
                print(f"Error with {technique.name} technique: {exc}")
            return []

    def _record(self, result: Result, successes: list[Result]) -> None:
        if result.status_code not in _NOT_BYPASSED:
            print(f"[+] BYPASS FOUND! {_format(result)}")
            successes.append(result)
            try:
                save_forbidden_bypass(result.url)
            except OSError as exc:
                if self.config.verbose:
                    print(f"Warning: Could not save bypass to file: {exc}")
        elif self.config.verbose:
            print(f"[-] Failed: {_format(result)}")

    def run(self) -> list[Result]:
        """Run every selected technique and return the successful results.

        Returns an empty list when the target does not answer 403 and the
        user declines to continue.
        """
        config = self.config
        self.client = HttpClient(timeout=config.timeout, user_agent=config.user_agent)
        try:
            return self._run(self.client)
        finally:
            self.client.close()

    def _run(self, client: HttpClient) -> list[Result]:
        config = self.config
        if config.random_user_agent:
            config.user_agent = self._pick_user_agent()
            if config.verbose:
                print(f"Using random User-Agent: {config.user_agent}")

        try:
            verify_url(config.url, client)
        except (NotForbiddenError, RequestError) as exc:
            if not self._confirm(str(exc)):
                return []

        base = BypassConfig(
            url=config.url,
            user_agent=config.user_agent,
            wordlist_path=config.wordlist_path,
            verbose=config.verbose,
            random_ua=config.random_user_agent,
        )

        print(f"Starting 403 bypass attempts on {config.url}")
        print("============================================")

        selected = [t for t in get_techniques() if self.should_run(t.category)]
        successes: list[Result] = []
        with ThreadPoolExecutor(max_workers=config.threads) as pool:
            futures = [pool.submit(self._run_technique, t, client, base)
                       for t in selected]
            for future in as_completed(futures):
                for result in future.result():
                    self._record(result, successes)

        self.show_summary(successes)

        if config.burp_output and successes:
            try:
                generate_burp_project(successes, config.burp_output)
            except OSError as exc:
                print(f"Error generating Burp Suite project: {exc}")
            else:
                print(f"Burp Suite project saved to {config.burp_output}")
        return successes

    def show_summary(self, results: list[Result]) -> None:
        """Print the found bypasses, saving them when an output file is set."""
        print("\n============= RESULTS =============")
        if not results:
            print("No bypasses found for the given URL.")
            print("Try with different techniques or check if the protection can be bypassed.")
            print("Consider using a custom wordlist with `-w` option or try the "
                  "combined techniques category.")
            return

        print(f"Found {len(results)} potential bypasses:")
        for number, result in enumerate(results, start=1):
            print(f"{number}. {_format(result)}")

        if self.config.output_file:
            try:
                save_results(results, self.config.output_file, self.config.url)
            except OSError as exc:
                print(f"Error creating output file: {exc}")

        print("\nSuccessful bypasses have been saved to forbidden_bypass.txt")
        print("\nTips:")
        print("* Try combined techniques for better results")
        print("* Check each bypass manually to confirm access")
        print("* Different status codes may indicate different levels of access")
        print("* Consider using a custom wordlist with `-w` option")

        print("\nExample curl command for first successful bypass:")
        print(curl_command(results[0]))
        print("\nExample Python request for first successful bypass:")
        print(python_request(results[0]))