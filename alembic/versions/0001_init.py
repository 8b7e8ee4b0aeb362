"""initial resources schema

Revision ID: 0001
Revises: 
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'tipo_recurso',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre_tipo', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tipo_recurso_id'), 'tipo_recurso', ['id'], unique=False)

    op.create_table(
        'tipo_vehiculo',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre_tipo', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tipo_vehiculo_id'), 'tipo_vehiculo', ['id'], unique=False)

    op.create_table(
        'bombero',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(length=50), nullable=False),
        sa.Column('a_paterno', sa.String(length=50), nullable=False),
        sa.Column('a_materno', sa.String(length=50), nullable=False),
        sa.Column('telefono', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_bombero_id'), 'bombero', ['id'], unique=False)
    op.create_index(op.f('ix_bombero_telefono'), 'bombero', ['telefono'], unique=True)

    op.create_table(
        'recurso',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre', sa.String(length=50), nullable=False),
        sa.Column('cantidad', sa.Integer(), nullable=False),
        sa.Column('estado', sa.String(length=50), nullable=False),
        sa.Column('tipo_recurso_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['tipo_recurso_id'], ['tipo_recurso.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_recurso_id'), 'recurso', ['id'], unique=False)

    op.create_table(
        'vehiculo',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('marca', sa.String(length=50), nullable=False),
        sa.Column('modelo', sa.String(length=50), nullable=False),
        sa.Column('patente', sa.String(length=6), nullable=False),
        sa.Column('conductor', sa.String(length=50), nullable=False),
        sa.Column('estado', sa.String(length=50), nullable=False),
        sa.Column('tipo_vehiculo_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['tipo_vehiculo_id'], ['tipo_vehiculo.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_vehiculo_id'), 'vehiculo', ['id'], unique=False)
    op.create_index(op.f('ix_vehiculo_patente'), 'vehiculo', ['patente'], unique=True)

    op.create_table(
        'solicitud_recurso',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('titulo', sa.String(length=50), nullable=False),
        sa.Column('detalle', sa.String(length=400), nullable=False),
        sa.Column('estado', sa.String(length=50), nullable=False),
        sa.Column('bombero_id', sa.Integer(), nullable=False),
        sa.Column('recurso_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['bombero_id'], ['bombero.id']),
        sa.ForeignKeyConstraint(['recurso_id'], ['recurso.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_solicitud_recurso_id'), 'solicitud_recurso', ['id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_solicitud_recurso_id'), table_name='solicitud_recurso')
    op.drop_table('solicitud_recurso')
    op.drop_index(op.f('ix_vehiculo_patente'), table_name='vehiculo')
    op.drop_index(op.f('ix_vehiculo_id'), table_name='vehiculo')
    op.drop_table('vehiculo')
    op.drop_index(op.f('ix_recurso_id'), table_name='recurso')
    op.drop_table('recurso')
    op.drop_index(op.f('ix_bombero_telefono'), table_name='bombero')
    op.drop_index(op.f('ix_bombero_id'), table_name='bombero')
    op.drop_table('bombero')
    op.drop_index(op.f('ix_tipo_vehiculo_id'), table_name='tipo_vehiculo')
    op.drop_table('tipo_vehiculo')
    op.drop_index(op.f('ix_tipo_recurso_id'), table_name='tipo_recurso')
    op.drop_table('tipo_recurso')
