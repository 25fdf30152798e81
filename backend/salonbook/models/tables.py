from sqlalchemy import Column, ForeignKey, Integer, Text, text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()
metadata = Base.metadata


class Users(Base):
    __tablename__ = 'users'

    user_type = Column(Text, nullable=False, server_default=text("'customer'"))  # customer / vendor / admin
    id = Column(Integer, primary_key=True)
    first_name = Column(Text)
    last_name = Column(Text)
    business_name = Column(Text)
    is_active = Column(Integer, nullable=False, server_default=text('1'))
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    staff = relationship('Staff', back_populates='vendor')


class Staff(Base):
    __tablename__ = 'staff'

    vendor_id = Column(ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    schedule = Column(Text, nullable=False, server_default=text("'{}'"))
    id = Column(Integer, primary_key=True)
    is_active = Column(Integer, nullable=False, server_default=text('1'))
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    vendor = relationship('Users', back_populates='staff')
    bookings = relationship('Bookings', back_populates='staff')

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Bookings(Base):
    __tablename__ = 'bookings'

    vendor_id = Column(ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    customer_id = Column(ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    date_start = Column(Text, nullable=False)  # ISO "YYYY-MM-DDTHH:MM:SS", local time
    duration_minutes = Column(Integer)
    status = Column(Text, nullable=False, server_default=text("'pending'"))
    id = Column(Integer, primary_key=True)
    staff_id = Column(ForeignKey('staff.id', ondelete='SET NULL'))
    created_at = Column(Text, nullable=False, server_default=text('CURRENT_TIMESTAMP'))

    staff = relationship('Staff', back_populates='bookings')
