"""
Permission registry: single source of truth for all mobile permission keys,
labels, categories, and the schedule/notification defaults handed to every
new collaborator.
"""

# Categories, in display order. "match" is the key-name stem each category
# groups on.
PERMISSION_CATEGORIES = {
    "clients":        {"label": "Client Management",             "match": "Client"},
    "jobs":           {"label": "Job Management",                "match": "Job"},
    "reports":        {"label": "Reports & Analytics",           "match": "Report"},
    "invoicing":      {"label": "Invoicing & Financials",        "match": "Invoice"},
    "time-tracking":  {"label": "Time & Activity Tracking",      "match": "Time"},
    "materials":      {"label": "Material & Inventory",          "match": "Material"},
    "communications": {"label": "Communication & Notifications", "match": "Notification"},
}

ALL_PERMISSIONS = {
    # Client Management
    "canViewClients":             {"label": "View Clients",                  "category": "clients"},
    "canEditClients":             {"label": "Edit Clients",                  "category": "clients"},
    "canCreateClients":           {"label": "Create Clients",                "category": "clients"},
    "canDeleteClients":           {"label": "Delete Clients",                "category": "clients"},
    "canViewClientDetails":       {"label": "View Client Details",           "category": "clients"},
    "canViewClientSensitiveData": {"label": "View Client Sensitive Data",    "category": "clients"},

    # Job Management
    "canViewJobs":          {"label": "View Jobs",           "category": "jobs"},
    "canEditJobs":          {"label": "Edit Jobs",           "category": "jobs"},
    "canCreateJobs":        {"label": "Create Jobs",         "category": "jobs"},
    "canDeleteJobs":        {"label": "Delete Jobs",         "category": "jobs"},
    "canViewJobDetails":    {"label": "View Job Details",    "category": "jobs"},
    "canViewJobFinancials": {"label": "View Job Financials", "category": "jobs"},
    "canUpdateJobStatus":   {"label": "Update Job Status",   "category": "jobs"},
    "canAddJobNotes":       {"label": "Add Job Notes",       "category": "jobs"},
    "canUploadJobPhotos":   {"label": "Upload Job Photos",   "category": "jobs"},

    # Reports & Analytics
    "canViewReports":            {"label": "View Reports",            "category": "reports"},
    "canCreateReports":          {"label": "Create Reports",          "category": "reports"},
    "canExportReports":          {"label": "Export Reports",          "category": "reports"},
    "canViewFinancialReports":   {"label": "View Financial Reports",  "category": "reports"},
    "canViewPerformanceMetrics": {"label": "View Performance Metrics", "category": "reports"},

    # Invoicing & Financials
    "canViewInvoices":       {"label": "View Invoices",        "category": "invoicing"},
    "canEditInvoices":       {"label": "Edit Invoices",        "category": "invoicing"},
    "canCreateInvoices":     {"label": "Create Invoices",      "category": "invoicing"},
    "canDeleteInvoices":     {"label": "Delete Invoices",      "category": "invoicing"},
    "canViewInvoiceAmounts": {"label": "View Invoice Amounts", "category": "invoicing"},
    "canViewPaymentHistory": {"label": "View Payment History", "category": "invoicing"},

    # Time & Activity Tracking
    "canTrackTime":        {"label": "Track Time",         "category": "time-tracking"},
    "canViewTimeEntries":  {"label": "View Time Entries",  "category": "time-tracking"},
    "canEditTimeEntries":  {"label": "Edit Time Entries",  "category": "time-tracking"},
    "canViewActivityLogs": {"label": "View Activity Logs", "category": "time-tracking"},

    # Material & Inventory
    "canViewMaterials":   {"label": "View Materials",   "category": "materials"},
    "canEditMaterials":   {"label": "Edit Materials",   "category": "materials"},
    "canViewInventory":   {"label": "View Inventory",   "category": "materials"},
    "canUpdateInventory": {"label": "Update Inventory", "category": "materials"},

    # Communication & Notifications
    "canSendNotifications": {"label": "Send Notifications", "category": "communications"},
    "canViewMessages":      {"label": "View Messages",      "category": "communications"},
    "canSendMessages":      {"label": "Send Messages",      "category": "communications"},
    "canViewSystemAlerts":  {"label": "View System Alerts", "category": "communications"},
}

# Alternate spellings accepted wherever a category name is looked up
CATEGORY_ALIASES = {
    "client": "clients",
    "job": "jobs",
    "report": "reports",
    "invoice": "invoicing",
    "invoices": "invoicing",
    "time": "time-tracking",
    "time_tracking": "time-tracking",
    "timetracking": "time-tracking",
    "material": "materials",
    "inventory": "materials",
    "communication": "communications",
}
CATEGORY_ALIASES.update(
    {info["label"].lower(): category for category, info in PERMISSION_CATEGORIES.items()}
)

# Keys per category, in registry order
CATEGORY_KEYS = {
    category: [key for key, info in ALL_PERMISSIONS.items() if info["category"] == category]
    for category in PERMISSION_CATEGORIES
}

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

# Saturday keeps its shorter 09:00-13:00 window even though it is off by default.
DEFAULT_WORK_SCHEDULE = {
    "monday":    {"start": "09:00", "end": "17:00", "isWorking": True},
    "tuesday":   {"start": "09:00", "end": "17:00", "isWorking": True},
    "wednesday": {"start": "09:00", "end": "17:00", "isWorking": True},
    "thursday":  {"start": "09:00", "end": "17:00", "isWorking": True},
    "friday":    {"start": "09:00", "end": "17:00", "isWorking": True},
    "saturday":  {"start": "09:00", "end": "13:00", "isWorking": False},
    "sunday":    {"start": "09:00", "end": "17:00", "isWorking": False},
}

DEFAULT_NOTIFICATION_SETTINGS = {
    "emailNotifications": True,
    "smsNotifications": False,
    "pushNotifications": True,
    "jobAssignments": True,
    "statusUpdates": True,
    "deadlineReminders": True,
    "systemAlerts": False,
}
