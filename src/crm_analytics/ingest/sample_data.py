"""Static demo dataset used to populate the dashboard.

Six months of revenue (Jan-Jun 2024) with a matching set of companies and
deals. Deal dates stay inside that window so every deal falls into exactly one
revenue month.
"""

COMPANIES = [
    {"id": 1, "name": "Acme Corp", "industry": "Manufacturing"},
    {"id": 2, "name": "Globex", "industry": "Energy"},
    {"id": 3, "name": "Initech", "industry": "Software"},
    {"id": 4, "name": "Umbrella Health", "industry": "Healthcare"},
    {"id": 5, "name": "Stark Industries", "industry": "Aerospace"},
    {"id": 6, "name": "Wayne Enterprises", "industry": "Conglomerate"},
    {"id": 7, "name": "Hooli", "industry": "Internet"},
    {"id": 8, "name": "Vandelay Imports", "industry": "Logistics"},
    {"id": 9, "name": "Soylent Foods", "industry": "Food & Beverage"},
    {"id": 10, "name": "Cyberdyne Systems", "industry": "Robotics"},
    {"id": 11, "name": "Tyrell Biotech", "industry": "Biotech"},
    {"id": 12, "name": "Pied Piper", "industry": "Software"},
]

DEALS = [
    {"id": 101, "name": "Plant automation retrofit", "company": "Acme Corp",
     "value": 48000, "stage": "Won", "close_date": "2024-01-18"},
    {"id": 102, "name": "Grid analytics pilot", "company": "Globex",
     "value": 22000, "stage": "Lost", "close_date": "2024-01-29"},
    {"id": 103, "name": "ERP migration", "company": "Initech",
     "value": 36500, "stage": "Won", "close_date": "2024-02-09"},
    {"id": 104, "name": "Patient portal", "company": "Umbrella Health",
     "value": 41000, "stage": "Won", "close_date": "2024-02-21"},
    {"id": 105, "name": "Avionics telemetry", "company": "Stark Industries",
     "value": 92000, "stage": "Negotiation", "close_date": "2024-06-28"},
    {"id": 106, "name": "Security operations center", "company": "Wayne Enterprises",
     "value": 75000, "stage": "Won", "close_date": "2024-03-14"},
    {"id": 107, "name": "Ad platform expansion", "company": "Hooli",
     "value": 58000, "stage": "Lost", "close_date": "2024-03-27"},
    {"id": 108, "name": "Fleet tracking", "company": "Vandelay Imports",
     "value": 19500, "stage": "Won", "close_date": "2024-04-05"},
    {"id": 109, "name": "Supply chain visibility", "company": "Soylent Foods",
     "value": 27000, "stage": "Proposal", "close_date": "2024-06-19"},
    {"id": 110, "name": "Robot fleet monitoring", "company": "Cyberdyne Systems",
     "value": 64000, "stage": "Won", "close_date": "2024-04-23"},
    {"id": 111, "name": "Lab data platform", "company": "Tyrell Biotech",
     "value": 53000, "stage": "Qualified", "close_date": "2024-06-24"},
    {"id": 112, "name": "Compression API licence", "company": "Pied Piper",
     "value": 12000, "stage": "Won", "close_date": "2024-05-02"},
    {"id": 113, "name": "Predictive maintenance", "company": "Acme Corp",
     "value": 31000, "stage": "Proposal", "close_date": "2024-06-11"},
    {"id": 114, "name": "Renewables forecasting", "company": "Globex",
     "value": 44000, "stage": "Won", "close_date": "2024-05-16"},
    {"id": 115, "name": "Helpdesk consolidation", "company": "Initech",
     "value": 9500, "stage": "Lost", "close_date": "2024-05-22"},
    {"id": 116, "name": "Claims automation", "company": "Umbrella Health",
     "value": 38000, "stage": "New", "close_date": "2024-06-30"},
    {"id": 117, "name": "Satellite ground software", "company": "Stark Industries",
     "value": 67000, "stage": "Won", "close_date": "2024-06-03"},
    {"id": 118, "name": "Data lake modernisation", "company": "Wayne Enterprises",
     "value": 82000, "stage": "Negotiation", "close_date": "2024-06-26"},
    {"id": 119, "name": "Search relevance tuning", "company": "Hooli",
     "value": 26000, "stage": "Qualified", "close_date": "2024-06-17"},
    {"id": 120, "name": "Customs brokerage portal", "company": "Vandelay Imports",
     "value": 15000, "stage": "Lost", "close_date": "2024-06-07"},
    {"id": 121, "name": "Recipe IP management", "company": "Soylent Foods",
     "value": 11000, "stage": "New", "close_date": "2024-06-27"},
    {"id": 122, "name": "Vision model training", "company": "Cyberdyne Systems",
     "value": 71000, "stage": "Proposal", "close_date": "2024-06-21"},
    {"id": 123, "name": "Clinical trial analytics", "company": "Tyrell Biotech",
     "value": 46000, "stage": "Won", "close_date": "2024-06-12"},
    {"id": 124, "name": "Edge storage rollout", "company": "Pied Piper",
     "value": 24000, "stage": "Negotiation", "close_date": "2024-06-25"},
]

REVENUE_BY_MONTH = [
    {"month": "Jan", "revenue": 118000, "deals": 14},
    {"month": "Feb", "revenue": 132500, "deals": 16},
    {"month": "Mar", "revenue": 127000, "deals": 15},
    {"month": "Apr", "revenue": 149000, "deals": 18},
    {"month": "May", "revenue": 163500, "deals": 19},
    {"month": "Jun", "revenue": 181000, "deals": 22},
]
