import re
import sys
import urllib.error
import urllib.parse
import urllib.request

BASE = "http://localhost:8000"

SUMMARY_LINES = re.compile(
    r"(Konto: [^<]+|Błąd[^<]*|TOTAL USD from all accounts: [^<]+"
    r"|Initial stake: [^<]+|(?:PROFIT|LOSS): [^<]+|Użytkownik [^<]+)"
)

def get(path):
    req = urllib.request.Request(f"{BASE}{path}")
    try:
        with urllib.request.urlopen(req) as r:
            return r.status, dict(r.headers), r.read().decode()
    except urllib.error.HTTPError as e:
        return e.code, dict(e.headers), e.read().decode()

def section(title):
    print(f"\n{'='*60}")
    print(f"### {title} ###")
    print('='*60)

def label(name):
    print(f"\n--- {name} ---")

def out(status, headers, html):
    print(f"status={status} cache-control={headers.get('cache-control')} "
          f"request-id={headers.get('x-request-id')}")
    for line in SUMMARY_LINES.findall(html):
        print("  " + " ".join(line.split()))

# ── Pages ──────────────────────────────────────────────────────
section("SINGLE-TENANT PAGE")

label("P1: GET / (env credentials)")
out(*get("/"))

section("USER PAGES")

for username in sys.argv[1:]:
    label(f"P2: GET /{username}")
    out(*get("/" + urllib.parse.quote(username)))

label("P3: GET unknown user (expect 404)")
out(*get("/ghost_user_9999"))

print("\n\n=== ALL CHECKS COMPLETE ===\n")
