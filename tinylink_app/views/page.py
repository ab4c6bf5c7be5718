"""
HTML rendering of the link-directory page.

Works only from a PageState, so rendering never touches the API.
All user-supplied text goes through html.escape.
"""

from html import escape
from urllib.parse import quote

from tinylink_app.views.directory import DirectoryRow, PageState

EMPTY_DIRECTORY = "No links yet. Create your first short URL above."

# Copy forms write to the clipboard in the browser, then post the result.
COPY_SCRIPT = """
<script>
  document.querySelectorAll("form.copy-form").forEach(function (form) {
    form.addEventListener("submit", function (event) {
      event.preventDefault();
      var outcome = form.querySelector("input[name=outcome]");
      var done = function (result) {
        outcome.value = result;
        form.submit();
      };
      if (!navigator.clipboard) {
        done("denied");
        return;
      }
      navigator.clipboard.writeText(form.elements.text.value).then(
        function () { done("copied"); },
        function () { done("denied"); }
      );
    });
  });
</script>
"""


def _row(row: DirectoryRow) -> str:
    short_url = escape(row.short_url)
    original_url = escape(row.original_url)
    delete_action = f"/links/{quote(row.code, safe='')}/delete"
    return f"""
        <tr class="hover:bg-slate-50/60" data-id="{escape(str(row.id))}">
          <td class="px-3 py-2 font-mono text-xs sm:text-sm">{escape(row.code)}</td>
          <td class="px-3 py-2">
            <div class="flex items-center gap-2">
              <a href="{short_url}" target="_blank" rel="noreferrer"
                 class="text-sky-600 hover:underline break-all text-xs sm:text-sm">{short_url}</a>
              <form method="post" action="/clipboard" class="copy-form">
                <input type="hidden" name="text" value="{short_url}">
                <input type="hidden" name="outcome" value="denied">
                <button type="submit"
                        class="rounded-full border border-slate-300 px-2 py-1 text-[10px] uppercase tracking-wide text-slate-600 hover:bg-slate-100">Copy</button>
              </form>
            </div>
          </td>
          <td class="px-3 py-2 max-w-xs">
            <a href="{original_url}" target="_blank" rel="noreferrer" title="{original_url}"
               class="block truncate text-slate-700 hover:underline">{original_url}</a>
          </td>
          <td class="px-3 py-2 text-center">
            <span class="inline-flex items-center justify-center rounded-full bg-slate-100 px-2 py-0.5 text-xs font-medium text-slate-700">{row.clicks}</span>
          </td>
          <td class="px-3 py-2 text-xs text-slate-500">{escape(row.last_clicked)}</td>
          <td class="px-3 py-2 text-right">
            <form method="post" action="{escape(delete_action)}">
              <button type="submit" class="text-xs text-red-600 hover:text-red-700 hover:underline">Delete</button>
            </form>
          </td>
        </tr>"""


def _directory(state: PageState) -> str:
    table = state.directory
    if table.is_empty:
        return f'<p class="text-sm text-slate-500">{EMPTY_DIRECTORY}</p>'

    rows = "".join(_row(row) for row in table.rows)
    return f"""
      <div class="overflow-x-auto">
        <table class="min-w-full text-left text-xs sm:text-sm border-t border-slate-200">
          <thead class="bg-slate-50 text-slate-600">
            <tr>
              <th class="px-3 py-2 font-medium">Code</th>
              <th class="px-3 py-2 font-medium">Short URL</th>
              <th class="px-3 py-2 font-medium">Original URL</th>
              <th class="px-3 py-2 font-medium text-center">Clicks</th>
              <th class="px-3 py-2 font-medium">Last clicked</th>
              <th class="px-3 py-2 font-medium text-right">Actions</th>
            </tr>
          </thead>
          <tbody class="divide-y divide-slate-100">{rows}
          </tbody>
        </table>
      </div>"""


def _notification(state: PageState) -> str:
    if state.notification is None:
        return ""
    return (
        f'<div class="mt-4 rounded-lg border px-3 py-2 text-xs sm:text-sm {state.notification_style}" '
        f'role="status">{escape(state.notification.text)}</div>'
    )


def render_page(state: PageState, app_name: str, api_base_url: str, max_code_length: int = 8) -> str:
    disabled = " disabled" if state.submitting else ""
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{escape(app_name)}</title>
  <script src="https://cdn.tailwindcss.com"></script>
</head>
<body>
<div class="min-h-screen bg-slate-100 flex flex-col">
  <header class="bg-slate-900 text-white px-4 py-3 shadow">
    <div class="max-w-5xl mx-auto flex items-center justify-between">
      <div class="flex items-center gap-2">
        <span class="inline-flex h-8 w-8 items-center justify-center rounded-full bg-sky-500 font-bold">{escape(app_name[:1].upper())}</span>
        <div>
          <h1 class="text-lg font-semibold">{escape(app_name)}</h1>
          <p class="text-xs text-slate-300">Simple URL shortener</p>
        </div>
      </div>
      <div class="hidden sm:block text-xs text-slate-300">
        Backend: <span class="font-mono">{escape(api_base_url)}</span>
      </div>
    </div>
  </header>

  <main class="flex-1 flex justify-center px-4 py-6">
    <div class="w-full max-w-5xl space-y-6">
      <section class="bg-white rounded-xl shadow-sm border border-slate-200 p-4 sm:p-6">
        <h2 class="text-lg font-semibold text-slate-800 mb-4">Create Short Link</h2>
        <form method="post" action="/links" class="space-y-4">
          <div>
            <label class="block text-sm font-medium text-slate-700 mb-1">
              Long URL <span class="text-red-500">*</span>
            </label>
            <input type="url" name="url" required value="{escape(state.url_input)}"
                   placeholder="https://example.com/very/long/url"
                   class="w-full rounded-lg border border-slate-300 px-3 py-2 text-sm shadow-sm bg-slate-50">
          </div>
          <div>
            <label class="block text-sm font-medium text-slate-700 mb-1">
              Custom code <span class="text-xs text-slate-400">(optional, 6-8 chars A-Z, a-z, 0-9)</span>
            </label>
            <input type="text" name="code" maxlength="{max_code_length}" value="{escape(state.code_input)}"
                   placeholder="e.g. yt2025"
                   class="w-full rounded-lg border border-slate-300 px-3 py-2 text-sm shadow-sm bg-slate-50">
          </div>
          <div class="flex items-center gap-3">
            <button type="submit"{disabled}
                    class="inline-flex items-center justify-center rounded-lg bg-sky-600 px-4 py-2 text-sm font-medium text-white shadow-sm hover:bg-sky-700 disabled:opacity-60 disabled:cursor-not-allowed">{state.submit_label}</button>
            <p class="text-xs text-slate-500">Leave custom code empty to auto-generate one.</p>
          </div>
        </form>
        {_notification(state)}
      </section>

      <section class="bg-white rounded-xl shadow-sm border border-slate-200 p-4 sm:p-6">
        <div class="flex items-center justify-between mb-3">
          <h2 class="text-lg font-semibold text-slate-800">All Links</h2>
          <span class="text-xs text-slate-500">Total: {state.directory.total}</span>
        </div>
        {_directory(state)}
      </section>
    </div>
  </main>
</div>
{COPY_SCRIPT}
</body>
</html>
"""
