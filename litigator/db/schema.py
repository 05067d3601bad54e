"""
PostgreSQL schema for attorneys, clients, cases and deadlines.
"""

POSTGRES_SCHEMA = """
CREATE TABLE IF NOT EXISTS attorneys (
    id SERIAL PRIMARY KEY,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    bar_number VARCHAR(50) NOT NULL UNIQUE,
    email TEXT UNIQUE,
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE TABLE IF NOT EXISTS clients (
    id SERIAL PRIMARY KEY,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    email TEXT,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE TABLE IF NOT EXISTS cases (
    id SERIAL PRIMARY KEY,
    case_number VARCHAR(50) NOT NULL UNIQUE,
    case_title VARCHAR(200) NOT NULL,
    case_type VARCHAR(50) NOT NULL,
    filing_date TIMESTAMP NOT NULL,
    status VARCHAR(20) NOT NULL DEFAULT 'Active',
    estimated_value NUMERIC(18, 2),
    client_id INTEGER REFERENCES clients(id) ON DELETE SET NULL,
    assigned_attorney_id INTEGER REFERENCES attorneys(id) ON DELETE SET NULL
);

CREATE TABLE IF NOT EXISTS deadlines (
    id SERIAL PRIMARY KEY,
    case_id INTEGER NOT NULL REFERENCES cases(id) ON DELETE CASCADE,
    deadline_type VARCHAR(100) NOT NULL,
    description VARCHAR(500),
    deadline_date TIMESTAMP NOT NULL,
    completed_date TIMESTAMP,
    is_completed BOOLEAN NOT NULL DEFAULT FALSE,
    is_critical BOOLEAN NOT NULL DEFAULT FALSE
);

CREATE INDEX IF NOT EXISTS idx_cases_attorney ON cases(assigned_attorney_id);
CREATE INDEX IF NOT EXISTS idx_deadlines_case ON deadlines(case_id, deadline_date);
"""
