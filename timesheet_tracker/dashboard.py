import logging
from html import escape
from string import Template
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from timesheet_tracker.store import TimesheetStore
from timesheet_tracker.utils import get_store, server_time_label

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Dashboard"])

PROJECTS = ["CI/CD Pipeline", "Web Development", "DevOps", "Testing"]

# ==========================================================
# PAGE SHELL
# Totals and the recent list are filled in by the script from
# /api/timesheets; only the request count is rendered server side.
# ==========================================================
DASHBOARD_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
    <title>Timesheet App - CI/CD Demo</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 0; padding: 20px; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); min-height: 100vh; }
        .container { max-width: 800px; margin: 0 auto; background: white; padding: 30px; border-radius: 12px; box-shadow: 0 10px 40px rgba(0,0,0,0.2); }
        h1 { color: #667eea; margin-top: 0; }
        .status { color: #28a745; font-weight: bold; font-size: 18px; }
        .info { background: #f8f9fa; padding: 15px; border-radius: 8px; margin: 20px 0; border-left: 4px solid #667eea; }
        .form-group { margin: 15px 0; }
        label { display: block; margin-bottom: 5px; font-weight: bold; color: #333; }
        input, select { width: 100%; padding: 10px; border: 2px solid #e0e0e0; border-radius: 6px; font-size: 14px; }
        button { background: #667eea; color: white; padding: 12px 30px; border: none; border-radius: 6px; cursor: pointer; font-size: 16px; font-weight: bold; }
        button:hover { background: #5568d3; }
        .timesheet-list { margin-top: 30px; }
        .timesheet-item { background: #f8f9fa; padding: 15px; margin: 10px 0; border-radius: 8px; border-left: 4px solid #28a745; }
        .stats { display: grid; grid-template-columns: repeat(3, 1fr); gap: 15px; margin: 20px 0; }
        .stat-card { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 20px; border-radius: 8px; text-align: center; }
        .stat-value { font-size: 32px; font-weight: bold; }
        .stat-label { font-size: 14px; opacity: 0.9; }
    </style>
</head>
<body>
    <div class="container">
        <h1>&#9200; Timesheet Tracker</h1>
        <p class="status">&#10003; System Online</p>

        <div class="stats">
            <div class="stat-card">
                <div class="stat-value" id="totalEntries">0</div>
                <div class="stat-label">Total Entries</div>
            </div>
            <div class="stat-card">
                <div class="stat-value" id="totalHours">0</div>
                <div class="stat-label">Total Hours</div>
            </div>
            <div class="stat-card">
                <div class="stat-value" id="requestCount">$request_count</div>
                <div class="stat-label">API Requests</div>
            </div>
        </div>

        <div class="info">
            <p><strong>Version:</strong> $version</p>
            <p><strong>Deployed:</strong> $deployment_time</p>
            <p><strong>Server Time:</strong> $server_time</p>
        </div>

        <h2>Submit Timesheet</h2>
        <form id="timesheetForm">
            <div class="form-group">
                <label>Employee Name</label>
                <input type="text" id="name" required>
            </div>
            <div class="form-group">
                <label>Date</label>
                <input type="date" id="date" required>
            </div>
            <div class="form-group">
                <label>Hours Worked</label>
                <input type="number" id="hours" min="0" max="24" step="0.5" required>
            </div>
            <div class="form-group">
                <label>Project</label>
                <select id="project" required>
                    <option value="">Select Project</option>
$project_options
                </select>
            </div>
            <button type="submit">Submit Timesheet</button>
        </form>

        <div class="timesheet-list">
            <h2>Recent Timesheets</h2>
            <div id="timesheets"></div>
        </div>
    </div>

    <script>
        function esc(v) {
            const d = document.createElement('div');
            d.textContent = v === undefined || v === null ? '' : String(v);
            return d.innerHTML;
        }

        function loadTimesheets() {
            fetch('/api/timesheets')
                .then(r => r.json())
                .then(data => {
                    document.getElementById('totalEntries').textContent = data.total;
                    document.getElementById('totalHours').textContent = data.totalHours;

                    const html = data.timesheets.map(t =>
                        '<div class="timesheet-item">' +
                            '<strong>' + esc(t.name) + '</strong> - ' + esc(t.project) + '<br>' +
                            'Date: ' + esc(t.date) + ' | Hours: ' + esc(t.hours) + '<br>' +
                            '<small>Submitted: ' + new Date(t.timestamp).toLocaleString() + '</small>' +
                        '</div>'
                    ).join('');
                    document.getElementById('timesheets').innerHTML = html || '<p>No timesheets yet</p>';
                });
        }

        document.getElementById('timesheetForm').onsubmit = async (e) => {
            e.preventDefault();
            const data = {
                name: document.getElementById('name').value,
                date: document.getElementById('date').value,
                hours: parseFloat(document.getElementById('hours').value),
                project: document.getElementById('project').value
            };

            await fetch('/api/timesheets', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify(data)
            });

            e.target.reset();
            loadTimesheets();
        };

        loadTimesheets();
        setInterval(loadTimesheets, 5000);
    </script>
</body>
</html>
""")


def render_dashboard(store: TimesheetStore) -> str:
    options = "\n".join(
        f'                    <option value="{escape(p)}">{escape(p)}</option>' for p in PROJECTS
    )
    return DASHBOARD_TEMPLATE.substitute(
        request_count=store.request_count,
        version=escape(store.version),
        deployment_time=escape(store.deployment_time),
        server_time=escape(server_time_label()),
        project_options=options,
    )


# ==========================================================
# HOME / DASHBOARD
# ==========================================================
@router.get("/", response_class=HTMLResponse)
async def home(store: TimesheetStore = Depends(get_store)):
    logger.info("Home page accessed")
    return HTMLResponse(render_dashboard(store))
